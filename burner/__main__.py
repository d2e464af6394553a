"""Allow running Burner with `python -m burner`."""

from burner.interfaces.cli.main import main

main()
