import sys

from datasplit.main import main

sys.exit(main())
