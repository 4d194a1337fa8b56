# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import unittest

from cv_builder.errors import TemplateNotFoundError
from cv_builder.models import Template
from cv_builder.templates import TemplateRegistry


class TestTemplateRegistry(unittest.TestCase):

    def setUp(self):
        self.registry = TemplateRegistry()

    def test_builtins_seeded(self):
        names = [t.name for t in self.registry.list()]
        self.assertEqual(names, [
            "Classic Professional", "Modern", "Executive", "Creative Designer", "Tech Minimalist",
        ])
        self.assertEqual(len(self.registry), 5)

    def test_lookup_by_id_or_name(self):
        self.assertEqual(self.registry.get(2).name, "Modern")
        self.assertEqual(self.registry.get("2").name, "Modern")
        self.assertEqual(self.registry.get("tech minimalist").id, 5)
        self.assertIn("Executive", self.registry)

    def test_unknown_template(self):
        with self.assertRaises(TemplateNotFoundError):
            self.registry.get(99)
        with self.assertRaises(TemplateNotFoundError):
            self.registry.get("Nope")

    def test_register_assigns_next_id(self):
        added = self.registry.register(Template(name="Plain", html_template="<p>{{ full_name }}</p>"))
        self.assertEqual(added.id, 6)
        self.assertIs(self.registry.get("Plain"), added)

    def test_register_clashing_id(self):
        added = self.registry.register(Template(id=1, name="Other", html_template=""))
        self.assertEqual(added.id, 6)
        self.assertEqual(self.registry.get(1).name, "Classic Professional")

    def test_replace_bumps_version(self):
        before = self.registry.get("Modern")
        after = self.registry.register(Template(name="Modern", html_template="<p>new</p>"))
        self.assertEqual(after.id, before.id)
        self.assertEqual(after.version, before.version + 1)
        # Earlier lookups are unaffected
        self.assertNotEqual(before.html_template, after.html_template)

    def test_inactive_hidden_by_default(self):
        self.registry.register(Template(name="Retired", html_template="", is_active=False))
        self.assertNotIn("Retired", [t.name for t in self.registry.list()])
        self.assertIn("Retired", [t.name for t in self.registry.list(active_only=False)])

    def test_empty_registry(self):
        registry = TemplateRegistry(seed_builtins=False)
        self.assertEqual(len(registry), 0)
        self.assertEqual(registry.register(Template(name="First", html_template="")).id, 1)


if __name__ == '__main__':
    unittest.main()
