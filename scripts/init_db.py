import os
import sys

# Add project root to sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from loaders.config import DATABASE_URL
from models import get_engine, init_db


def main():
    if not DATABASE_URL:
        print("SPECS_DATABASE_URL is required.")
        return 1

    print("Initializing remote tables...")
    engine = get_engine(DATABASE_URL)
    init_db(engine)
    engine.dispose()
    print("Tables 'specs' and 'models' are ready.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
