import sys

from arbdesk.runner import main

sys.exit(main())
