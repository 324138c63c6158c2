"""
Simple launcher for the Dineout Offer Finder.
This runs the Streamlit UI which loads the CSV tables itself.
"""

import os
import subprocess
import sys


def main():
    print(" DINEOUT OFFER FINDER")
    print("=" * 60)
    print()
    print(" The app will:")
    print("  Load allCards.csv and the offer CSVs from OFFERS_DATA_DIR (default: data/)")
    print("  Launch web interface")
    print()
    print(" Starting Streamlit UI...")
    print(" Will open at: http://localhost:8501")
    print(" Press Ctrl+C to stop")
    print("=" * 60)
    print()

    streamlit_script = os.path.join(os.path.dirname(__file__), "dineout_offers", "ui", "streamlit_app.py")

    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run",
            streamlit_script
        ], check=True)
    except KeyboardInterrupt:
        print("\n\n Shutting down gracefully...")
    except subprocess.CalledProcessError as e:
        print(f"\n Error: {e}")
        print("\n Try running directly:")
        print(f"   streamlit run {streamlit_script}")


if __name__ == "__main__":
    main()
