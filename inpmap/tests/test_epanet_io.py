import unittest
from os.path import abspath, dirname, join

import inpmap
from inpmap.epanet.exceptions import EN_ERROR_CODES, ENFileError, EpanetException, NoSectionError

testdir = dirname(abspath(str(__file__)))
datadir = join(testdir, "networks_for_testing")


class TestInpFileRead(unittest.TestCase):
    @classmethod
    def setUpClass(self):
        inp_file = join(datadir, "layout.inp")
        self.inpfile = inpmap.epanet.InpFile()
        self.layout = self.inpfile.read(inp_file)

    def test_node_coordinates(self):
        self.assertEqual(self.layout.node_name_list, ["R1", "J1", "J2"])
        self.assertEqual(self.layout.get_node("R1").coordinates, (499000.0, 2199000.0))
        self.assertEqual(self.layout.get_node("J2").coordinates, (501000.0, 2200000.0))

    def test_duplicate_coordinates_last_record_wins(self):
        self.assertEqual(self.layout.get_node("J1").coordinates, (500000.0, 2200500.0))

    def test_non_numeric_coordinates_dropped(self):
        self.assertNotIn("J3", self.layout.node_name_list)
        with self.assertRaises(KeyError):
            self.layout.get_node("J3")

    def test_pipes_from_both_pipe_sections(self):
        # [Pipes] later in the file resumes the [PIPES] table
        self.assertEqual(self.layout.pipe_name_list, ["P1", "P2", "P3", "P9"])
        pipes = dict(self.layout.pipes())
        self.assertEqual(pipes["P2"].start_node_name, "J1")
        self.assertEqual(pipes["P2"].end_node_name, "J2")
        self.assertEqual(pipes["P9"].end_node_name, "JX")

    def test_short_pipe_record_dropped(self):
        self.assertNotIn("P8", self.layout.pipe_name_list)

    def test_reservoirs(self):
        self.assertEqual(self.layout.reservoir_name_list, ["R1"])
        self.assertTrue(self.layout.is_reservoir("R1"))
        self.assertFalse(self.layout.is_reservoir("J1"))

    def test_vertices_in_file_order(self):
        self.assertEqual(self.layout.get_vertices("P2"),
                         [(500200.0, 2200800.0), (500600.0, 2200900.0)])
        self.assertEqual(self.layout.get_vertices("P1"), [])

    def test_skipped_records(self):
        skipped = [(sec, line.split()[0]) for sec, lnum, line in self.inpfile.skipped]
        self.assertEqual(sorted(skipped),
                         sorted([("[PIPES]", "P8"), ("[COORDINATES]", "J3"), ("[VERTICES]", "P2")]))

    def test_other_sections_recognized(self):
        self.assertIn("[TAGS]", self.inpfile.sections)
        self.assertIn("[END]", self.inpfile.sections)
        self.assertEqual(self.inpfile.top_comments, [" Layout test network for inpmap"])

    def test_layout_name(self):
        self.assertEqual(self.layout.name, join(datadir, "layout.inp"))


class TestInpFileLines(unittest.TestCase):
    def read(self, text):
        return inpmap.epanet.InpFile().read_lines(text.splitlines())

    def test_vertex_order(self):
        layout = self.read("""
[COORDINATES]
 N1 0 0
 N2 3 3
[PIPES]
 P1 N1 N2
[VERTICES]
 P1 1 1
 P1 2 2
""")
        self.assertEqual(layout.pipe_coordinates("P1"),
                         [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0)])

    def test_reservoir_listed_after_coordinates(self):
        layout = self.read("""
[COORDINATES]
 N1 0 0
 R1 3 3
[PIPES]
 P1 R1 N1
[RESERVOIRS]
 R1 100
""")
        self.assertEqual(layout.get_node("R1").node_type, "Reservoir")
        self.assertEqual(layout.get_node("N1").node_type, "Junction")
        self.assertEqual(layout.junction_name_list, ["N1"])

    def test_case_insensitive_sections_and_comments(self):
        layout = self.read("""
;top comment
[Coordinates]
;Node X Y
 N1 1.5 2.5 ; inline comment
 N2 1e3 -2.5E2

[pipes] ; header comment
 P1 N1 N2 100 ; inline
""")
        self.assertEqual(layout.get_node("N1").coordinates, (1.5, 2.5))
        self.assertEqual(layout.get_node("N2").coordinates, (1000.0, -250.0))
        self.assertEqual(layout.pipe_name_list, ["P1"])

    def test_extra_tokens_ignored(self):
        layout = self.read("""
[COORDINATES]
 N1 1 2 3 4
 N2 5 6 extra
[PIPES]
 P1 N1 N2 100 200 100 0 Open
[VERTICES]
 P1 3 4 extra
[RESERVOIRS]
 N2 100 pattern
""")
        self.assertEqual(layout.get_node("N1").coordinates, (1.0, 2.0))
        self.assertEqual(layout.get_vertices("P1"), [(3.0, 4.0)])
        self.assertEqual(layout.reservoir_name_list, ["N2"])

    def test_lines_outside_sections_ignored(self):
        layout = self.read("""
stray text before any section
[COORDINATES]
 N1 0 0
 N2 1 1
[PIPES]
 P1 N1 N2
""")
        self.assertEqual(layout.num_nodes, 2)
        self.assertEqual(layout.num_pipes, 1)

    def test_infinite_coordinates_dropped(self):
        layout = self.read("""
[COORDINATES]
 N1 0 0
 N2 inf 1
[PIPES]
 P1 N1 N2
""")
        self.assertEqual(layout.node_name_list, ["N1"])

    def test_all_coordinates_malformed(self):
        with self.assertRaises(NoSectionError) as cm:
            self.read("""
[COORDINATES]
 N1 x y
[PIPES]
 P1 N1 N2
""")
        self.assertEqual(cm.exception.section, "[COORDINATES]")


class TestInpFileErrors(unittest.TestCase):
    def test_missing_file(self):
        inp_file = join(datadir, "does_not_exist.inp")
        with self.assertRaises(ENFileError) as cm:
            inpmap.network.read_inpfile(inp_file)
        self.assertIn(inp_file, str(cm.exception))
        self.assertEqual(cm.exception.code, 302)
        self.assertEqual(cm.exception.filename, inp_file)
        self.assertIsInstance(cm.exception, OSError)
        self.assertIsInstance(cm.exception, EpanetException)
        self.assertEqual(str(cm.exception),
                         "(Error 302) cannot open input file {!r}".format(inp_file))

    def test_error_codes(self):
        self.assertEqual(sorted(EN_ERROR_CODES), [302])
        e = EpanetException(999, "x")
        self.assertEqual(e.code, 999)
        self.assertEqual(str(e), "(Error 999) unknown error ['x']")

    def test_missing_coordinates_section(self):
        with self.assertRaises(NoSectionError) as cm:
            inpmap.network.read_inpfile(join(datadir, "no_coordinates.inp"))
        self.assertIn("[COORDINATES]", str(cm.exception))

    def test_missing_pipes_section(self):
        with self.assertRaises(NoSectionError) as cm:
            inpmap.network.read_inpfile(join(datadir, "no_pipes.inp"))
        self.assertIn("[PIPES]", str(cm.exception))
        self.assertIsInstance(cm.exception, ValueError)


if __name__ == "__main__":
    unittest.main()
