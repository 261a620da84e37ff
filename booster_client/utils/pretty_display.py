# pretty print display stuff

def print_info(message: str):
    print(f"[INFO]: {message}")

def print_border():
    print("=" * 44)
    print()

def print_startup_message():
    print_border()
    print("Welcome to the Booster Pack Simulator!")
    print("Open a pack, flip your cards, build your collection.")
    print_border()
