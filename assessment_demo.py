import sys
import pathlib
from dotenv import load_dotenv

ROOT = pathlib.Path(__file__).parent
ENV_FILE = ROOT / ".env"

load_dotenv(ENV_FILE)

RESET = "\033[0m"
BOLD = "\033[1m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
RED = "\033[91m"


def main():
    print(f"\n{BOLD}{CYAN}ADAPTIVE ASSESSMENT - CLI DEMO{RESET}")
    print("-" * 40)
    print("1. Take an adaptive test")
    print("2. Simulate test-takers")
    print("0. Exit")
    print("-" * 40)
    choice = input("Choose (0-2): ").strip()
    if choice == "1":
        from cli.run_adaptive_test import run_adaptive_test
        run_adaptive_test()
    elif choice == "2":
        from cli.simulate_sessions import run_simulation, print_report
        print_report(run_simulation())
    elif choice == "0":
        print(f"{GREEN}Goodbye!{RESET}")
        sys.exit(0)
    else:
        print(f"{YELLOW}Invalid choice, please enter 0-2.{RESET}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n{RED}Stopped.{RESET}")
