"""hostfetch - Show host properties as colorized terminal lines."""

import logging

__version__ = "0.1.0"
__license__ = "Apache-2.0"

# psutil and rich stay quiet unless something is wrong
logging.getLogger("psutil").setLevel(logging.WARNING)
logging.getLogger("markdown_it").setLevel(logging.WARNING)
