import sys

from urbreaks.cli import main

sys.exit(main())
