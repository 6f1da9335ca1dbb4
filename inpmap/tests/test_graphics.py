import os
import tempfile
import unittest
import warnings
from os.path import abspath, dirname, isfile, join

import folium
import matplotlib.pylab as plt

import inpmap
from inpmap.utils.exceptions import BasemapWarning

testdir = dirname(abspath(str(__file__)))
datadir = join(testdir, "networks_for_testing")


def _feature_group(m, name):
    for child in m._children.values():
        if isinstance(child, folium.FeatureGroup) and child.layer_name == name:
            return child
    raise KeyError(name)


def _elements(m, name, cls):
    return [child for child in _feature_group(m, name)._children.values()
            if isinstance(child, cls)]


def _tile_layers(m):
    return [child for child in m._children.values() if isinstance(child, folium.TileLayer)]


def _tile_warnings(caught):
    return [warning for warning in caught
            if issubclass(warning.category, (BasemapWarning, UserWarning))]


class TestEpanetOnMap(unittest.TestCase):
    def test_example_network(self):
        m = inpmap.epanet_on_map(join(datadir, "example.inp"), 14, "N", basemap="none")
        self.assertIsInstance(m, folium.Map)

        lines = _elements(m, "Pipes", folium.PolyLine)
        self.assertEqual(len(lines), 1)
        self.assertEqual(len(lines[0].locations), 2)
        for lat, lon in lines[0].locations:
            self.assertTrue(-90 <= lat <= 90)
            self.assertTrue(-180 <= lon <= 180)
        self.assertAlmostEqual(lines[0].locations[0][1], -99.0, 6)

        junctions = _elements(m, "Junctions", folium.CircleMarker)
        self.assertEqual(len(junctions), 2)
        self.assertEqual(len(_feature_group(m, "Reservoirs")._children), 0)

    def test_unresolved_pipes_skipped(self):
        m = inpmap.epanet_on_map(join(datadir, "layout.inp"), basemap="none")
        lines = _elements(m, "Pipes", folium.PolyLine)
        self.assertEqual(len(lines), 2)
        # P2 runs through two vertices
        self.assertEqual(sorted(len(line.locations) for line in lines), [2, 4])

    def test_reservoir_is_square(self):
        m = inpmap.epanet_on_map(join(datadir, "layout.inp"), basemap="none")
        reservoirs = _elements(m, "Reservoirs", folium.RegularPolygonMarker)
        self.assertEqual(len(reservoirs), 1)
        self.assertEqual(len(_elements(m, "Junctions", folium.CircleMarker)), 2)
        lat, lon = inpmap.gis.utm_to_latlon(499000, 2199000, 14, "N")
        self.assertAlmostEqual(reservoirs[0].location[0], lat, 6)
        self.assertAlmostEqual(reservoirs[0].location[1], lon, 6)

    def test_unknown_basemap_warns(self):
        with self.assertWarns(BasemapWarning):
            m = inpmap.epanet_on_map(join(datadir, "example.inp"), basemap="not-a-basemap")
        self.assertEqual(len(_tile_layers(m)), 0)
        self.assertEqual(len(_elements(m, "Pipes", folium.PolyLine)), 1)

    def test_no_basemap(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", BasemapWarning)
            m = inpmap.epanet_on_map(join(datadir, "example.inp"), basemap="none")
        self.assertEqual(len(_tile_layers(m)), 0)

    def test_streets_basemap(self):
        m = inpmap.epanet_on_map(join(datadir, "example.inp"))
        self.assertEqual(len(_tile_layers(m)), 1)

    def test_named_basemaps_load(self):
        for basemap, provider in inpmap.graphics.BASEMAPS.items():
            with warnings.catch_warnings(record=True) as w:
                warnings.simplefilter("always")
                m = inpmap.epanet_on_map(join(datadir, "example.inp"), basemap=basemap)
            self.assertEqual(_tile_warnings(w), [], basemap)
            num_layers = 0 if provider is None else 1
            self.assertEqual(len(_tile_layers(m)), num_layers, basemap)

    def test_provider_name_basemap(self):
        m = inpmap.epanet_on_map(join(datadir, "example.inp"), basemap="Esri.WorldStreetMap")
        self.assertEqual(len(_tile_layers(m)), 1)

    def test_basemap_requiring_api_key_warns(self):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            m = inpmap.epanet_on_map(join(datadir, "example.inp"), basemap="CartoDB.Positron")
        w = _tile_warnings(w)
        self.assertEqual([warning.category for warning in w], [BasemapWarning])
        self.assertIn("API key", str(w[0].message))
        self.assertEqual(len(_tile_layers(m)), 0)
        self.assertEqual(len(_elements(m, "Pipes", folium.PolyLine)), 1)

    def test_options_validated_before_reading(self):
        missing = join(datadir, "does_not_exist.inp")
        with self.assertRaises(ValueError) as cm:
            inpmap.epanet_on_map(missing, utm_zone=61)
        self.assertIn("utm_zone", str(cm.exception))
        with self.assertRaises(ValueError) as cm:
            inpmap.epanet_on_map(missing, hemisphere="X")
        self.assertIn("hemisphere", str(cm.exception))
        with self.assertRaises(ValueError) as cm:
            inpmap.epanet_on_map(missing, line_color="not-a-color")
        self.assertIn("line_color", str(cm.exception))
        with self.assertRaises(ValueError) as cm:
            inpmap.epanet_on_map(missing, line_width=0)
        self.assertIn("line_width", str(cm.exception))
        with self.assertRaises(ValueError) as cm:
            inpmap.epanet_on_map(missing, line_width=float("inf"))
        self.assertIn("line_width", str(cm.exception))
        with self.assertRaises(ValueError) as cm:
            inpmap.epanet_on_map(missing, utm_zone="14")
        self.assertIn("utm_zone", str(cm.exception))
        with self.assertRaises(ValueError) as cm:
            inpmap.epanet_on_map(missing, reservoir_color=(0, 2, 0))
        self.assertIn("reservoir_color", str(cm.exception))
        with self.assertRaises(ValueError):
            inpmap.epanet_on_map(12)

    def test_missing_file(self):
        with self.assertRaises(inpmap.epanet.exceptions.ENFileError):
            inpmap.epanet_on_map(join(datadir, "does_not_exist.inp"))

    def test_style(self):
        m = inpmap.epanet_on_map(join(datadir, "layout.inp"), line_width=2.5,
                                 line_color=(1, 1, 0), marker_face_color="c",
                                 basemap="none")
        line = _elements(m, "Pipes", folium.PolyLine)[0]
        self.assertEqual(line.options["color"], "#ffff00")
        self.assertEqual(line.options["weight"], 2.5)
        junction = _elements(m, "Junctions", folium.CircleMarker)[0]
        self.assertEqual(junction.options["fillColor"], "#00bfbf")

    def test_save_html(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            filename = os.path.join(tmpdir, "example.html")
            inpmap.epanet_on_map(join(datadir, "example.inp"), basemap="none",
                                 filename=filename)
            self.assertTrue(isfile(filename))


class TestPlotNetwork(unittest.TestCase):
    @classmethod
    def setUpClass(self):
        self.layout = inpmap.network.read_inpfile(join(datadir, "layout.inp"))

    def test_plot_network(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            filename = os.path.join(tmpdir, "plot_network.png")
            plt.close("all")
            ax = inpmap.graphics.plot_network(self.layout, title="Layout", node_labels=True,
                                              legend=True, show_plot=False, filename=filename)
            self.assertTrue(isfile(filename))
            self.assertEqual(len(ax.collections), 3)
            self.assertEqual(ax.get_xlabel(), "Longitude")
            plt.close("all")

    def test_plot_network_options(self):
        options = {"projection": {"utm_zone": 14, "hemisphere": "N"},
                   "style": {"line_width": 3, "basemap": "none"}}
        ax = inpmap.graphics.plot_network(self.layout, options=options, show_plot=False)
        xmin, xmax = ax.get_xlim()
        self.assertTrue(-100 < xmin < xmax < -98)
        plt.close("all")

    def test_invalid_options(self):
        with self.assertRaises(ValueError):
            inpmap.graphics.plot_network(self.layout, options=inpmap.graphics.StyleOptions(),
                                         show_plot=False)


if __name__ == "__main__":
    unittest.main()
