# -*- coding: utf-8 -*-
"""Side-by-side R and Python recipes for everyday vector data tasks.

Each Recipe pairs an sf snippet with the geopandas/shapely snippet that gives the same result, in the order a
first session with spatial data usually goes: make a point, make a set of points with a CRS, fetch a dataset,
read a shapefile, subset it, plot it. The Python snippets use the same calls the geoprimer functions wrap, so
the rendered guide and the library never disagree.
"""

import os


class Recipe:
    """One step of the guide: what it does, in R and in Python."""

    def __init__(self, key, title, description, r_code, python_code):
        """Initialize a recipe.

        Parameters:
        -----------
        key : str
            Short identifier, used for lookups and anchors
        title : str
            Section heading
        description : str
            Prose explanation shown above the code
        r_code : str
            R snippet
        python_code : str
            Equivalent Python snippet
        """
        self.key = key
        self.title = title
        self.description = description
        self.r_code = r_code.strip("\n")
        self.python_code = python_code.strip("\n")

    def to_markdown(self, level=2):
        """Render the recipe as a markdown section."""
        heading = "#" * level
        return "\n".join(
            [
                f"{heading} {self.title}",
                "",
                self.description,
                "",
                "**R**",
                "",
                "```r",
                self.r_code,
                "```",
                "",
                "**Python**",
                "",
                "```python",
                self.python_code,
                "```",
                "",
            ]
        )

    def __str__(self):
        """String representation of the recipe."""
        return f"Recipe '{self.key}': {self.title}"


RECIPES = [
    Recipe(
        key="setup",
        title="Installing the libraries",
        description="Both ecosystems need one package for vector data. sf bundles GEOS, GDAL and PROJ; "
        "on the Python side geopandas pulls in shapely, pyproj and pyogrio.",
        r_code="""
install.packages("sf")
library(sf)
""",
        python_code="""
# pip install geopandas matplotlib
import geopandas as gpd
from shapely.geometry import Point
""",
    ),
    Recipe(
        key="point",
        title="Creating a single point",
        description="A point is just a coordinate pair. Neither object knows anything about a CRS yet.",
        r_code="""
pt <- st_point(c(24.9384, 60.1699))
pt
""",
        python_code="""
pt = Point(24.9384, 60.1699)
pt.x, pt.y
""",
    ),
    Recipe(
        key="points",
        title="Creating named points with a CRS",
        description="Put the coordinates in a table, turn the coordinate columns into geometries and declare "
        "which CRS they are in. EPSG:4326 is plain longitude/latitude on WGS84.",
        r_code="""
cities <- data.frame(
  name = c("Helsinki", "Tampere", "Turku"),
  x = c(24.9384, 23.7610, 22.2666),
  y = c(60.1699, 61.4978, 60.4518)
)
cities_sf <- st_as_sf(cities, coords = c("x", "y"), crs = 4326)
st_crs(cities_sf)
""",
        python_code="""
cities = pd.DataFrame({
    "name": ["Helsinki", "Tampere", "Turku"],
    "x": [24.9384, 23.7610, 22.2666],
    "y": [60.1699, 61.4978, 60.4518],
})
cities_gdf = gpd.GeoDataFrame(cities, geometry=gpd.points_from_xy(cities.x, cities.y), crs="EPSG:4326")
cities_gdf.crs
""",
    ),
    Recipe(
        key="crs",
        title="Assigning and transforming a CRS",
        description="Assigning a CRS only labels the coordinates; transforming actually recomputes them. "
        "Use the first when data arrives without CRS information, the second to change projection.",
        r_code="""
st_crs(pts) <- 4326
pts_3067 <- st_transform(pts, 3067)
""",
        python_code="""
pts = pts.set_crs("EPSG:4326")
pts_3067 = pts.to_crs("EPSG:3067")
""",
    ),
    Recipe(
        key="download",
        title="Downloading a zipped dataset",
        description="Fetch the archive only if it has not been extracted before, so the script can be rerun "
        "without hitting the network.",
        r_code="""
if (!dir.exists(data_dir)) {
  tmp <- tempfile(fileext = ".zip")
  download.file(url, tmp, mode = "wb")
  unzip(tmp, exdir = data_dir)
  unlink(tmp)
}
""",
        python_code="""
if not os.path.exists(data_dir):
    response = requests.get(url, timeout=60)
    response.raise_for_status()
    with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
        archive.extractall(data_dir)
""",
    ),
    Recipe(
        key="read",
        title="Reading a shapefile",
        description="Point the reader at the .shp file; the .dbf, .shx and .prj files next to it are picked "
        "up automatically and the attribute table comes along as ordinary columns.",
        r_code="""
countries <- st_read(file.path(data_dir, "countries.shp"))
head(countries)
""",
        python_code="""
countries = gpd.read_file(os.path.join(data_dir, "countries.shp"))
countries.head()
""",
    ),
    Recipe(
        key="csv",
        title="Reading points from a CSV file",
        description="GTFS stops.txt is a CSV with stop_lon and stop_lat columns in WGS84. Read it as a table, "
        "then build the point geometries the same way as for hand-made points.",
        r_code="""
stops <- read.csv(file.path(data_dir, "stops.txt"))
stops_sf <- st_as_sf(stops, coords = c("stop_lon", "stop_lat"), crs = 4326)
""",
        python_code="""
stops = pd.read_csv(os.path.join(data_dir, "stops.txt"), dtype={"stop_id": str})
stops_gdf = gpd.GeoDataFrame(stops, geometry=gpd.points_from_xy(stops.stop_lon, stops.stop_lat), crs="EPSG:4326")
""",
    ),
    Recipe(
        key="filter",
        title="Filtering rows by a substring",
        description="Keep the features whose name contains a pattern. Both versions return the same number "
        "of rows; missing names never match.",
        r_code="""
library(dplyr)
guinea <- filter(countries, grepl("Guinea", NAME))
nrow(guinea)
""",
        python_code="""
guinea = countries[countries["NAME"].str.contains("Guinea", na=False)]
len(guinea)
""",
    ),
    Recipe(
        key="plot",
        title="Plotting",
        description="Draw all features in grey and the subset on top. sf uses base graphics with add = TRUE; "
        "geopandas draws into a shared matplotlib axes.",
        r_code="""
plot(st_geometry(countries), col = "lightgray", border = "white")
plot(st_geometry(guinea), col = "red", add = TRUE)
""",
        python_code="""
ax = countries.plot(color="lightgray", edgecolor="white")
guinea.plot(ax=ax, color="red")
plt.show()
""",
    ),
]


def get_recipes():
    """Get all recipes in guide order."""
    return list(RECIPES)


def get_recipe(key):
    """Get a recipe by key.

    Raises:
    -------
    KeyError
        If no recipe has this key
    """
    for recipe in RECIPES:
        if recipe.key == key:
            return recipe

    raise KeyError(f"Recipe '{key}' not found")


def render_markdown(recipes=None, title="Vector data in R and Python"):
    """Render recipes as one markdown document with a table of contents.

    Parameters:
    -----------
    recipes : list of Recipe, optional
        Recipes to render; all recipes when None
    title : str
        Document title

    Returns:
    --------
    markdown : str
    """
    if recipes is None:
        recipes = RECIPES

    lines = [f"# {title}", ""]
    for idx, recipe in enumerate(recipes, start=1):
        lines.append(f"{idx}. [{recipe.title}](#{recipe.key})")
    lines.append("")

    for recipe in recipes:
        lines.append(f'<a id="{recipe.key}"></a>')
        lines.append("")
        lines.append(recipe.to_markdown())

    return "\n".join(lines)


def write_guide(output_path, recipes=None, title="Vector data in R and Python"):
    """Write the rendered guide to a markdown file.

    Returns:
    --------
    output_path : str
    """
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(render_markdown(recipes, title=title))

    return output_path
