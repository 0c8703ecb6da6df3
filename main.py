"""
Main entry point for playing Bible Imposter in the terminal.
"""

from bible_imposter.app import main


if __name__ == "__main__":
    main()
