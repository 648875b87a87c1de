import sys

from gradient_ppm.image import main

sys.exit(main())
