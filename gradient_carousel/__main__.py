import sys

from carousel_viewer import main

sys.exit(main())
