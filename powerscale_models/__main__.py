import sys

from powerscale_models.cli import main

sys.exit(main())
