import sys

from blinkt.main import main

sys.exit(main())
