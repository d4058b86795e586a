"""pocketbook - personal income and expense ledger stored as CSV."""

__version__ = "0.1.0"


# Import main lazily so the domain and storage layers load without click
def __getattr__(name):
    if name == "main":
        from pocketbook.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
