"""
Sliding Boxes
Ten rectangles bounce between the top and bottom of a window, each
starting a little later than the one before it.
"""
