"""Run with: python -m degeneracycollapse"""
from degeneracycollapse.main import main

if __name__ == "__main__":
    main()
