from .trip_stats import TripStats, calculate_trip_stats, round_half_up
