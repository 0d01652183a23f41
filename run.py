import subprocess
import sys
import time

from finance_dashboard.client import FinanceClient, load_dashboard
from finance_dashboard.config import load_settings


def backend_command():
    """Run the API through the package entry point so logging is configured."""
    return [sys.executable, "-m", "finance_dashboard.main"]


def run_backend():
    print("Starting backend server...")
    return subprocess.Popen(backend_command())


def show_dashboard(settings, attempts=10):
    """Print the dashboard once the backend answers."""
    client = FinanceClient(settings.api_url_base)
    for _ in range(attempts):
        lines = load_dashboard(client)
        if lines != ["ERRO: API OFFLINE"]:
            break
        time.sleep(1)
    print("\n".join(lines))


def main():
    settings = load_settings()
    backend = run_backend()
    show_dashboard(settings)
    backend.wait()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nShutting down servers...")
        sys.exit(0)
