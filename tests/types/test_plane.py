"""Test the airport_control.types module."""
import unittest

from airport_control.types import Action, Instruction, Plane, WeatherProvider
from airport_control.weather import FixedWeather


class TestPlane(unittest.TestCase):
    def test_planes_compare_by_identity(self):
        plane = Plane("G-ABCD")
        self.assertEqual(plane, plane)
        self.assertNotEqual(plane, Plane("G-ABCD"))

    def test_str(self):
        self.assertEqual(str(Plane("G-ABCD")), "G-ABCD")


class TestInstruction(unittest.TestCase):
    def test_str(self):
        instruction = Instruction(plane=Plane("G-ABCD"), action=Action.TAKE_OFF)
        self.assertEqual(str(instruction), "G-ABCD_take_off")


class TestWeatherProvider(unittest.TestCase):
    def test_fixed_weather_is_a_provider(self):
        self.assertIsInstance(FixedWeather(), WeatherProvider)

    def test_object_without_query_is_not_a_provider(self):
        self.assertNotIsInstance(object(), WeatherProvider)


if __name__ == "__main__":
    unittest.main()
