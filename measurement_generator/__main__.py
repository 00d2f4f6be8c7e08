import sys

from .cli.generate import main

sys.exit(main())
