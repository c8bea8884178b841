import sys

from mazechase.main import main

sys.exit(main())
