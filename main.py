"""
Flight Code Classifier Experiment - Entry Point

Train and compare both featurizer variants:
    python main.py

Or import and use programmatically:
    from flightcodes.experiment import run_experiment

Environment variables:
    DATA_TRAIN_PATH: Training CSV (default: TrainingData/FlightCodes.csv)
    DATA_TEST_PATH: Evaluation CSV (default: TrainingData/MoreFlightCodes.csv)
    FLIGHTCODES_PAUSE_ON_EXIT: Wait for Enter before exiting (default: false)
"""

import sys

from flightcodes.experiment import main


if __name__ == "__main__":
    sys.exit(main())
