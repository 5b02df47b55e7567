import sys

from lingo.main import main

sys.exit(main())
