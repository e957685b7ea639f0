"""Allow ``python -m svg2geojson``."""

import sys

from svg2geojson.cli import main

sys.exit(main())
