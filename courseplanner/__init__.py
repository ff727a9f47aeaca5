"""
Course planner: load a course data file and browse courses and prerequisites.
"""
