"""
The inpmap.gis.network module contains methods to convert network layouts
to GIS formatted data
"""

import numpy as np
import pandas as pd
import geopandas as gpd
from shapely.geometry import LineString, Point


class NetworkLayoutGIS:
    """
    Network layout GIS class

    Contains GeoDataFrames of the junctions, reservoirs, and pipes of a
    network layout. Each GeoDataFrame is indexed by element name (index
    name "name").

    Parameters
    ----------
    gis_data : dict, optional
        Dictionary of GeoDataFrames containing data to populate an instance
        of NetworkLayoutGIS.  Valid dictionary keys are 'junctions',
        'reservoirs', and 'pipes'
    """

    def __init__(self, gis_data=None) -> None:

        self.junctions = gpd.GeoDataFrame()
        self.reservoirs = gpd.GeoDataFrame()
        self.pipes = gpd.GeoDataFrame()

        if isinstance(gis_data, dict):
            if 'junctions' in gis_data.keys():
                assert isinstance(gis_data['junctions'], gpd.GeoDataFrame)
                self.junctions = gis_data['junctions']

            if 'reservoirs' in gis_data.keys():
                assert isinstance(gis_data['reservoirs'], gpd.GeoDataFrame)
                self.reservoirs = gis_data['reservoirs']

            if 'pipes' in gis_data.keys():
                assert isinstance(gis_data['pipes'], gpd.GeoDataFrame)
                self.pipes = gis_data['pipes']

    def _create_gis(self, layout, crs: str = None) -> None:
        """
        Create GIS data from a network layout.

        This method is used by inpmap.network.io.to_gis

        Pipes whose start or end node is not in the layout are not included.
        Pipe geometry runs from the start node through the pipe vertices to
        the end node.

        Parameters
        ----------
        layout : NetworkLayout
            Network layout
        crs : str, optional
            Coordinate reference system of the layout coordinates, by default None
        """

        def _extract_geodataframe(records, columns, crs=None):
            df = pd.DataFrame(records, columns=['name'] + columns + ['geometry'])
            df.set_index('name', inplace=True)
            return gpd.GeoDataFrame(df, geometry='geometry', crs=crs)

        # Junctions
        records = [{'name': name, 'node_type': node.node_type,
                    'geometry': Point(node.coordinates)}
                   for name, node in layout.junctions()]
        self.junctions = _extract_geodataframe(records, ['node_type'], crs)

        # Reservoirs
        records = [{'name': name, 'node_type': node.node_type,
                    'geometry': Point(node.coordinates)}
                   for name, node in layout.reservoirs()]
        self.reservoirs = _extract_geodataframe(records, ['node_type'], crs)

        # Pipes
        records = []
        for name, pipe in layout.drawable_pipes():
            records.append({'name': name,
                            'start_node_name': pipe.start_node_name,
                            'end_node_name': pipe.end_node_name,
                            'geometry': LineString(layout.pipe_coordinates(pipe))})
        self.pipes = _extract_geodataframe(records, ['start_node_name', 'end_node_name'], crs)

    @property
    def total_bounds(self):
        """
        Bounds of all junctions, reservoirs and pipes, as a numpy array
        [minx, miny, maxx, maxy]. All values are NaN if there is no geometry.
        """
        bounds = [data.total_bounds for data in [self.junctions, self.reservoirs, self.pipes]
                  if 'geometry' in data.columns and len(data) > 0]
        if len(bounds) == 0:
            return np.array([np.nan] * 4)
        bounds = np.array(bounds)
        return np.array([bounds[:, 0].min(), bounds[:, 1].min(),
                         bounds[:, 2].max(), bounds[:, 3].max()])

    def to_crs(self, crs):
        """
        Transform CRS of the junctions, reservoirs, and pipes GeoDataFrames.

        Calls geopandas.GeoDataFrame.to_crs on each GeoDataFrame.

        Parameters
        ----------
        crs : str
            Coordinate reference system
        """
        for data in [self.junctions, self.reservoirs, self.pipes]:
            if 'geometry' in data.columns:
                data.to_crs(crs, inplace=True)

    def set_crs(self, crs, allow_override=False):
        """
        Set CRS of the junctions, reservoirs, and pipes GeoDataFrames.

        Calls geopandas.GeoDataFrame.set_crs on each GeoDataFrame.

        Parameters
        ----------
        crs : str
            Coordinate reference system
        allow_override : bool (optional)
            Allow override of existing coordinate reference system
        """
        for data in [self.junctions, self.reservoirs, self.pipes]:
            if 'geometry' in data.columns:
                data.set_crs(crs, inplace=True, allow_override=allow_override)

    def write_geojson(self, prefix: str):
        """
        Write the junctions, reservoirs, and pipes GeoDataFrames to GeoJSON
        files, one file for each element type ("<prefix>_junctions.geojson",
        etc.). Empty GeoDataFrames are not written.

        Parameters
        ----------
        prefix : str
            File prefix
        """
        for name, data in [('junctions', self.junctions),
                           ('reservoirs', self.reservoirs),
                           ('pipes', self.pipes)]:
            if len(data) > 0:
                filename = prefix + '_' + name + '.geojson'
                data.reset_index().to_file(filename, driver='GeoJSON')
