import sys

from namenode_exporter.cli import main

sys.exit(main())
