"""Allow ``python -m hookloader``."""

from hookloader.app import main

main()
