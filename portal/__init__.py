"""
Station Portal - Access Core
============================
Session policy and authorization decisions for the multi-station
retail admin portal.
"""
