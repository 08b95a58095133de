import sys

from bigram_drill.cli.cli import main

sys.exit(main())
