import argparse
import os
import sys

import matplotlib.pyplot as plt

def plot_trips(geojson_path: str, output_img: str):
    """Draws every trip of an emitted FeatureCollection in its assigned color."""
    try:
        import geopandas as gpd
    except ImportError:
        print("geopandas not found. Please install the viz extra.")
        return

    gdf = gpd.read_file(geojson_path)
    if gdf.empty:
        print("No trips to plot.")
        return
    if gdf.crs is None:
        gdf = gdf.set_crs(epsg=4326)

    # Web Mercator for the basemap tiles
    gdf_web = gdf.to_crs(epsg=3857)

    fig, ax = plt.subplots(1, 1, figsize=(12, 12))
    for _, row in gdf_web.iterrows():
        gpd.GeoSeries([row.geometry], crs=gdf_web.crs).plot(
            ax=ax, color=row["color"], linewidth=2, alpha=0.8
        )
        start = row.geometry.coords[0]
        ax.annotate(row["trip_id"], xy=start, fontsize=8, color=row["color"])

    try:
        import contextily as ctx
        ctx.add_basemap(ax, source=ctx.providers.CartoDB.Positron)
    except ImportError:
        print("contextily not found. Plotting without basemap.")
    except Exception as e:
        print(f"Basemap error: {e}")

    ax.set_axis_off()
    input_filename = os.path.splitext(os.path.basename(geojson_path))[0]
    total_km = gdf["total_distance_km"].sum()
    ax.set_title(f"{input_filename}: {len(gdf)} trips, {total_km:.1f} km")

    plt.tight_layout()
    plt.savefig(output_img, dpi=300, bbox_inches='tight')
    print(f"Visualization saved to {output_img}")

def main():
    parser = argparse.ArgumentParser(description="Render trips produced by gpstrips.")
    parser.add_argument("geojson", type=str, help="FeatureCollection written by gpstrips.")
    parser.add_argument("-o", "--output", type=str, default=None, help="PNG file to write.")
    args = parser.parse_args()

    if not os.path.exists(args.geojson):
        print(f"Error: Input file {args.geojson} not found.")
        sys.exit(1)

    output_img = args.output or os.path.splitext(args.geojson)[0] + ".png"
    plot_trips(args.geojson, output_img)

if __name__ == "__main__":
    main()
