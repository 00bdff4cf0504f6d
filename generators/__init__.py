"""
Sample data generators for the Rehearsal Slot Finder.
"""
