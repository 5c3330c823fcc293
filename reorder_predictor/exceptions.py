#////////////////////////////////////////////////////////////////////////////////#
# File:         exceptions.py                                                    #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2026-10-12                                                       #
# Description:  Error types raised by the reorder predictor.                     #
#////////////////////////////////////////////////////////////////////////////////#

"""
Error types for the reorder predictor.

None of these are retried automatically. The session turns the first two into
failed states and reports them through the status message.
"""


class DataSourceError(Exception):
    """product list could not be fetched or decoded"""


class TrainingError(Exception):
    """fitting the reorder classifier failed"""


class PredictPreconditionError(RuntimeError):
    """prediction requested without a trained classifier (caller bug)"""


class InvalidTransitionError(ValueError):
    """event is not accepted in the current session state"""

    def __init__(self, state, event):
        self.state = state
        self.event = event
        super().__init__(f"Event {event.name} not allowed in state {state.name}")
