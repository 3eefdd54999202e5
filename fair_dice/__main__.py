import sys

from fair_dice.ui.cli import main

sys.exit(main())
