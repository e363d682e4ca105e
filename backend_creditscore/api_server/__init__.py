"""
API server package — HTTP interface to the scoring engine.

Scores metrics supplied in the request body and returns the assessment with
its derived analytics. Stateless: nothing is fetched or persisted.
"""
