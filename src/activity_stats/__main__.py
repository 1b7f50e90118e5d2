"""Allow ``python -m activity_stats``."""

from .cli import app

if __name__ == "__main__":
    app(prog_name="activity-stats")
