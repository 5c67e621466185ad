import sys

from menagerie.demo import main

sys.exit(main())
