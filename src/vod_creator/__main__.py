import sys

from vod_creator.main import main

sys.exit(main())
