from .gap_jump import TripSegmenter
