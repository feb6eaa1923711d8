"""Entry point for running the API server as module: python -m solforge"""

# Load .env file before importing anything else
from dotenv import load_dotenv
load_dotenv()

from solforge.main import main

if __name__ == "__main__":
    main()
