import sys

from spin_wheel.cli import main

sys.exit(main())
