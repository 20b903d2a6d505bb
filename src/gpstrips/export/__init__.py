from .geojson import trip_to_feature, build_feature_collection, dump_feature_collection
