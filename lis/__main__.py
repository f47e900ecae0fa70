import sys

from lis.repl import main

sys.exit(main())
