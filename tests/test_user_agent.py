"""Unit tests for User-Agent handling."""

import unittest
from unittest.mock import patch

from moby.useragent import build_user_agent, escape_str, insert_upstream_user_agent, unescape_str
from moby.useragent.config import BuildInfo
from moby.useragent.kernel import KernelVersionInfo

BUILD = BuildInfo(product="docker", version="24.0.7", git_commit="afdd53b")
BASE_UA = "docker/24.0.7 python/3.11.4 git-commit/afdd53b kernel/6.5.0-14-generic os/linux arch/amd64"


class HostPatchedTestCase(unittest.TestCase):
    kernel_version = KernelVersionInfo(6, 5, 0, "-14-generic")

    def setUp(self):
        patches = [
            patch("moby.useragent.platform_info.runtime_version", return_value="3.11.4"),
            patch("moby.useragent.platform_info.os_name", return_value="linux"),
            patch("moby.useragent.platform_info.arch_name", return_value="amd64"),
            patch("moby.useragent._user_agent.get_kernel_version", return_value=self.kernel_version),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)


class TestBuildUserAgent(HostPatchedTestCase):
    def test_basic_user_agent(self):
        self.assertEqual(build_user_agent(build=BUILD), BASE_UA)

    def test_empty_upstream_and_override(self):
        ua = build_user_agent("", "", build=BUILD)
        self.assertEqual(ua, BASE_UA)
        self.assertNotIn("UpstreamClient", ua)

    def test_none_upstream_and_override(self):
        self.assertEqual(build_user_agent(None, None, build=BUILD), BASE_UA)

    def test_override_returned_verbatim(self):
        self.assertEqual(build_user_agent(None, "my-agent/1.0", build=BUILD), "my-agent/1.0")

    def test_override_ignores_upstream(self):
        self.assertEqual(build_user_agent("compose/2.23.0", "my-agent/1.0", build=BUILD), "my-agent/1.0")

    def test_upstream_appended(self):
        ua = build_user_agent("compose/2.23.0", build=BUILD)
        self.assertEqual(ua, f"{BASE_UA} UpstreamClient(compose/2.23.0)")

    def test_upstream_escaped(self):
        ua = build_user_agent("foo(bar)\\baz", build=BUILD)
        self.assertTrue(ua.endswith(" UpstreamClient(foo\\(bar\\)\\\\baz)"))
        self.assertTrue(ua.startswith(BASE_UA))

    def test_field_order(self):
        names = [token.split("/", 1)[0] for token in build_user_agent(build=BUILD).split(" ")]
        self.assertEqual(names, ["docker", "python", "git-commit", "kernel", "os", "arch"])

    def test_custom_product(self):
        ua = build_user_agent(build=BuildInfo(product="moby", version="25.0.0", git_commit="deadbee"))
        self.assertTrue(ua.startswith("moby/25.0.0 python/3.11.4 git-commit/deadbee "))

    def test_default_build_info(self):
        from moby.useragent import GIT_COMMIT, __version__

        ua = build_user_agent()
        self.assertTrue(ua.startswith(f"docker/{__version__} python/3.11.4 git-commit/{GIT_COMMIT} "))


class TestBuildUserAgentWithoutKernel(HostPatchedTestCase):
    kernel_version = None

    def test_kernel_token_omitted(self):
        ua = build_user_agent(build=BUILD)
        self.assertEqual(ua, "docker/24.0.7 python/3.11.4 git-commit/afdd53b os/linux arch/amd64")
        self.assertNotIn("kernel/", ua)

    def test_upstream_still_appended(self):
        ua = build_user_agent("curl/8.4.0", build=BUILD)
        self.assertTrue(ua.endswith("arch/amd64 UpstreamClient(curl/8.4.0)"))


class TestBuildUserAgentInvalidFields(HostPatchedTestCase):
    def test_empty_arch_is_skipped(self):
        with patch("moby.useragent.platform_info.arch_name", return_value=""):
            ua = build_user_agent(build=BUILD)
        self.assertTrue(ua.endswith("os/linux"))

    def test_version_with_space_is_skipped(self):
        ua = build_user_agent(build=BuildInfo(product="docker", version="24.0.7 beta", git_commit="afdd53b"))
        self.assertTrue(ua.startswith("python/3.11.4 git-commit/afdd53b"))


class TestEscapeStr(unittest.TestCase):
    def test_escapes_parentheses_and_backslash(self):
        self.assertEqual(escape_str("foo(bar)\\baz"), "foo\\(bar\\)\\\\baz")

    def test_no_special_characters_unchanged(self):
        self.assertEqual(escape_str("compose/2.23.0"), "compose/2.23.0")
        self.assertEqual(escape_str(""), "")

    def test_semicolon_not_escaped_by_default(self):
        self.assertEqual(escape_str("a;b"), "a;b")

    def test_custom_chars(self):
        self.assertEqual(escape_str("a;b(c)", ";"), "a\\;b(c)")

    def test_nested_upstream(self):
        inner = insert_upstream_user_agent("curl/8.4.0", "docker/24.0.7")
        outer = insert_upstream_user_agent(inner, "docker/25.0.0")
        self.assertEqual(outer, "docker/25.0.0 UpstreamClient(docker/24.0.7 UpstreamClient\\(curl/8.4.0\\))")


class TestUnescapeStr(unittest.TestCase):
    def test_round_trip(self):
        for value in ["foo(bar)\\baz", "", "plain", "\\\\(", "((()))", "trailing\\"]:
            with self.subTest(value=value):
                self.assertEqual(unescape_str(escape_str(value)), value)

    def test_unescape(self):
        self.assertEqual(unescape_str("foo\\(bar\\)\\\\baz"), "foo(bar)\\baz")

    def test_trailing_backslash_kept(self):
        self.assertEqual(unescape_str("abc\\"), "abc\\")


class TestInsertUpstreamUserAgent(unittest.TestCase):
    def test_format(self):
        self.assertEqual(
            insert_upstream_user_agent("Go-http-client/1.1", "docker/24.0.7"),
            "docker/24.0.7 UpstreamClient(Go-http-client/1.1)",
        )


if __name__ == "__main__":
    unittest.main()
