"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Anomalies inside plan generation (unfilled slots, volume misses) are data
carried on the plan and validation report, not exceptions.
"""


class PlanPersistenceError(Exception):
    """Error while storing or removing a plan aggregate.

    Raised when the atomic creation of a plan with its sessions and
    prescriptions fails, or when a delete cannot be carried out.
    """

    pass
