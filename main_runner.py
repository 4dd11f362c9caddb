"""
Main Runner for the Grid Sweeper simulation
Provides menu-driven access to the terminal and pygame front ends
"""

import logging
import sys


def print_banner():
    """Print application banner"""
    print("=" * 70)
    print("    GRID SWEEPER - CLEANING ROBOT COVERAGE SIMULATION")
    print("=" * 70)
    print()


def print_menu():
    """Print the main menu"""
    print("Available Front Ends:")
    print()
    print("1. Terminal")
    print("   - Set map size, place obstacles, save/load maps")
    print("   - Live redraw with direction arrows and coverage")
    print()
    print("2. Pygame")
    print("   - 20x20 sample map, click to add obstacles")
    print("   - Pause/resume, reset and speed control")
    print()
    print("3. Console smoke run")
    print("   - Sample map swept at full speed, results only")
    print()
    print("0. Exit")
    print()


def run_terminal():
    """Run the interactive terminal menu"""
    from sweeper.sweeper_console.console_menu import ConsoleMenu
    ConsoleMenu().run()


def run_pygame():
    """Run the pygame visualizer"""
    print("Starting Grid Sweeper with Pygame visualization...")
    try:
        from sweeper.sweeper_pygame.visualizer_app import SweeperPygameVisualizer
    except ImportError as e:
        print(f"Error importing Pygame visualization: {e}")
        print("Please install pygame with: pip install pygame")
        return
    visualizer = SweeperPygameVisualizer()
    visualizer.run()


def run_smoke():
    """Run the sample sweep without delays"""
    from sweeper.sweeper_algorithm.main import run_console_test
    run_console_test()


def main():
    logging.basicConfig(level=logging.WARNING,
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    print_banner()

    choices = {
        '1': run_terminal,
        '2': run_pygame,
        '3': run_smoke,
    }

    while True:
        print_menu()
        try:
            choice = input("Enter your choice (0-3): ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            sys.exit(0)

        if choice == '0':
            print("Goodbye!")
            sys.exit(0)
        action = choices.get(choice)
        if action is None:
            print("Invalid choice. Please enter 0-3.")
            continue
        action()
        print()


if __name__ == '__main__':
    main()
