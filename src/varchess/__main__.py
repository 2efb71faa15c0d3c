import sys

from varchess.app import main

sys.exit(main())
