import sys

from sklearn_hasse.cli import main

sys.exit(main())
