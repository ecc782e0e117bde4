import os, sys, pdb, json, logging, re
import unittest as test

from hiccup import utils

class TestFunctions(test.TestCase):

    def test_is_media_type(self):
        self.assertTrue(utils.is_media_type("goob/gurn"))
        self.assertTrue(utils.is_media_type("text/plain"))
        self.assertTrue(utils.is_media_type("application/jsonld+json"))
        self.assertTrue(utils.is_media_type("json"))

        self.assertFalse(utils.is_media_type(""))
        self.assertFalse(utils.is_media_type(None))
        self.assertFalse(utils.is_media_type("text/"))
        self.assertFalse(utils.is_media_type("text/plain; charset=utf-8"))

    def test_parse_media_type(self):
        self.assertEqual(utils.parse_media_type("application/json"), "application/json")
        self.assertEqual(utils.parse_media_type("Application/YAML"), "application/yaml")
        self.assertEqual(utils.parse_media_type(" text/plain ; charset=utf-8"), "text/plain")
        self.assertEqual(utils.parse_media_type("application/json;q=0.9"), "application/json")
        self.assertEqual(utils.parse_media_type("application/vnd.api+json"), "application/vnd.api+json")

        # only the first value is considered
        self.assertEqual(utils.parse_media_type("text/html, application/xml;q=0.9, */*;q=0.8"),
                         "text/html")
        self.assertEqual(utils.parse_media_type("*/*"), "*/*")

    def test_parse_bare_token(self):
        self.assertEqual(utils.parse_media_type("json"), "json")
        self.assertEqual(utils.parse_media_type("YAML; charset=utf-8"), "yaml")
        self.assertEqual(utils.parse_media_type("json, text/plain"), "json")

    def test_parse_media_type_missing(self):
        self.assertEqual(utils.parse_media_type(None), "")
        self.assertEqual(utils.parse_media_type(""), "")
        self.assertEqual(utils.parse_media_type("   "), "")

    def test_parse_media_type_malformed(self):
        self.assertEqual(utils.parse_media_type("text/"), "")
        self.assertEqual(utils.parse_media_type("/plain"), "")
        self.assertEqual(utils.parse_media_type("text/plain/extra"), "")
        self.assertEqual(utils.parse_media_type("text /plain"), "")
        self.assertEqual(utils.parse_media_type(";charset=utf-8"), "")


if __name__ == '__main__':
    test.main()
