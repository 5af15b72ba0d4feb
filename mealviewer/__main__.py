import sys

from mealviewer.cli import main

sys.exit(main())
