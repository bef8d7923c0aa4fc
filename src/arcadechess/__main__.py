import sys

from arcadechess.app import main

sys.exit(main())
