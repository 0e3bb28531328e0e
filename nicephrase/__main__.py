import sys

from nicephrase.cli.main import main

sys.exit(main())
