import sys

from ttestflow.cli import main

sys.exit(main())
