from diffhue.core.application import run as cli_run

__all__ = ["run"]

def run():
    """Console entry point: filter a diff from stdin to stdout."""
    cli_run()

if __name__ == "__main__":
    run()
