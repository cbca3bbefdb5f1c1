import logging

from .testutils import TestBase

from memesites.version import MemeVersion
import memesites.error as err

LOG = logging.getLogger(__name__)


class TestVersion(TestBase):

    def test_init(self):
        self.assertEqual(str(MemeVersion('4.11.2')), '4.11.2')
        self.assertEqual(str(MemeVersion('3.0')), '3.0.0')
        self.assertEqual(str(MemeVersion('5')), '5.0.0')
        self.assertEqual(str(MemeVersion(4, 1, 1)), '4.1.1')
        self.assertEqual(str(MemeVersion(4, 1)), '4.1.0')
        with self.assertRaises(err.ParseError):
            MemeVersion('abc')
        with self.assertRaises(err.ParseError):
            MemeVersion(1, 2, 3, 4)

    def test_v4_11_2(self):
        mv = MemeVersion.from_string('4.11.2')
        self.assertIsInstance(mv, MemeVersion)
        self.assertEqual(mv.major, 4)
        self.assertEqual(mv.minor, 11)
        self.assertEqual(mv.trace, 2)
        self.assertEqual(mv.join('_'), '4_11_2')
        self.assertTrue(mv.is_supported)

    def test_trailing_text(self):
        mv = MemeVersion('3.0.14_patched')
        self.assertEqual(str(mv), '3.0.14')

    def test_supported(self):
        self.assertTrue(MemeVersion('3.0').is_supported)
        self.assertTrue(MemeVersion('3').is_supported)
        self.assertTrue(MemeVersion('10.1').is_supported)
        self.assertFalse(MemeVersion('2.4').is_supported)
        self.assertFalse(MemeVersion('2.99.9').is_supported)

    def test_compare(self):
        self.assertLess(MemeVersion('2.4'), MemeVersion('3.0'))
        self.assertLess(MemeVersion('4.9'), MemeVersion('4.11'))
        self.assertEqual(MemeVersion('4.11'), MemeVersion('4.11.0'))
        self.assertGreaterEqual(MemeVersion('5.0.1'), MemeVersion(5, 0))
        self.assertEqual(len({MemeVersion('4.1'), MemeVersion(4, 1, 0)}), 1)
