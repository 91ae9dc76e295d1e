"""
This is the main file to run the game.
It imports the main function from the invaders package and runs it.
"""

from invaders.app import run

if __name__ == "__main__":
    run()
