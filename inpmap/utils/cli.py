# coding: utf-8

import argparse
import pathlib

import inpmap
from inpmap.epanet.exceptions import ENFileError, NoSectionError


def epanet_on_map(args=None):
    """Draw an EPANET INP file with UTM coordinates on a Leaflet map and save
    it as HTML. This is a command-line script.
    Use the command ``epanet-on-map --help`` for details.

    For example, the command

    ``epanet-on-map Madrid1.inp --zone 30 --basemap satellite --open``

    writes ``Madrid1.html`` and opens it in a web browser.

    Parameters
    ----------
    args : list of str
        Arguments that can be used instead of reading from the command
        line. Generally not used.
    """
    parser = argparse.ArgumentParser(
        prog="epanet-on-map",
        description="""Draw the pipes, junctions, and reservoirs of an EPANET
        INP file with UTM coordinates on a Leaflet map and save it as HTML."""
    )
    parser.add_argument("infile", help="Name of the EPANET INP file.")
    parser.add_argument("-o", "--outfile",
                        help="Name of the HTML file to create (default: INFILE with .html suffix).")
    parser.add_argument("--zone", type=int, default=14, help="UTM zone, 1 to 60 (default: 14).")
    parser.add_argument("--hemisphere", default="N", help="N or S (default: N).")
    parser.add_argument("--basemap", default="streets",
                        help="Basemap style: " + ", ".join(inpmap.graphics.BASEMAPS) +
                        ", or a tile provider name (default: streets).")
    parser.add_argument("--line-width", type=float, default=1, help="Pipe line width (default: 1).")
    parser.add_argument("--line-color", default="red", help="Pipe color (default: red).")
    parser.add_argument("--marker-size", type=float, default=4, help="Junction marker size (default: 4).")
    parser.add_argument("--marker-color", default="blue", help="Junction color (default: blue).")
    parser.add_argument("--reservoir-size", type=float, default=5, help="Reservoir marker size (default: 5).")
    parser.add_argument("--reservoir-color", default="#00cc00", help="Reservoir color (default: #00cc00).")
    parser.add_argument("--geojson", metavar="PREFIX",
                        help="Also write latitude/longitude GeoJSON files PREFIX_junctions.geojson, etc.")
    parser.add_argument("--open", action="store_true", help="Open the map in a web browser.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to the console and inpmap.log.")
    args = parser.parse_args(args)
    infile = pathlib.Path(args.infile)
    if args.outfile is None:
        outfile = infile.with_suffix(".html")
    else:
        outfile = pathlib.Path(args.outfile)
    try:
        options = inpmap.graphics.MapOptions(
            projection=dict(utm_zone=args.zone, hemisphere=args.hemisphere),
            style=dict(line_width=args.line_width, line_color=args.line_color,
                       marker_size=args.marker_size, marker_face_color=args.marker_color,
                       reservoir_size=args.reservoir_size, reservoir_color=args.reservoir_color,
                       basemap=args.basemap))
    except ValueError as e:
        parser.error(str(e))
    if args.verbose:
        inpmap.start_logging()
    try:
        if not infile.exists():
            parser.error(f'The file "{infile}" does not exist.')
        if not outfile.parent.is_dir():
            parser.error(
                f'The path "{outfile.parent}" does not exist or is not a directory.'
            )
        layout = inpmap.network.read_inpfile(str(infile))
        inpmap.graphics.plot_leaflet_network(layout, options, filename=str(outfile),
                                             auto_open=args.open)
        if args.geojson:
            wn_gis = layout.to_gis(crs=inpmap.gis.utm_crs(args.zone, args.hemisphere))
            wn_gis.to_crs(inpmap.gis.WGS84)
            wn_gis.write_geojson(args.geojson)
    except (ValueError, ENFileError, NoSectionError) as e:
        parser.error(str(e))
    print(outfile)


if __name__ == "__main__":
    epanet_on_map()
