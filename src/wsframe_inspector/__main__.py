import sys

from wsframe_inspector.main import main


sys.exit(main())
