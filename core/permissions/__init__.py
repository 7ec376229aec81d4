"""
Role-based access control: a static role x resource x action matrix plus
ownership helpers.
"""
