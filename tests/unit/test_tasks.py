"""
Unit tests for task actions: the tool invocations each task issues.
"""

from dataclasses import replace
from datetime import date

import pytest

from sitectl.core.exceptions import ExternalToolError
from sitectl.core.settings import SitectlSettings
from sitectl.tasks import backup, compose, site

BUNDLE_ARGS = ["src/scripts/*.js", "--bundle", "--outdir=src/scripts/dist/", "--minify"]


class TestExpandGlob:
    def test_sorted_matches(self, project_dir):
        scripts = project_dir / "src" / "scripts"
        scripts.mkdir(parents=True)
        (scripts / "b.js").write_text("")
        (scripts / "a.js").write_text("")
        (scripts / "notes.txt").write_text("")

        assert site.expand_glob("src/scripts/*.js", project_dir) == [
            "src/scripts/a.js",
            "src/scripts/b.js",
        ]

    def test_no_match_passes_pattern_through(self, project_dir):
        assert site.expand_glob("src/scripts/*.js", project_dir) == ["src/scripts/*.js"]

    def test_plain_path_unchanged(self, project_dir):
        assert site.expand_glob("src/main.js", project_dir) == ["src/main.js"]


class TestBuild:
    def test_bundles_then_builds(self, task_ctx, invoker):
        site.build(task_ctx)

        assert invoker.calls == [("esbuild", BUNDLE_ARGS), ("jekyll", ["build"])]

    def test_bundle_failure_stops_before_site_build(self, task_ctx, invoker):
        invoker.exit_codes["esbuild"] = 1

        with pytest.raises(ExternalToolError) as exc_info:
            site.build(task_ctx)

        assert exc_info.value.message == "Bundle failed: esbuild error"
        assert invoker.count("jekyll") == 0


class TestDeploy:
    def test_sequence(self, task_ctx, invoker):
        site.deploy(task_ctx)

        assert invoker.calls == [
            ("jekyll", ["clean"]),
            ("esbuild", BUNDLE_ARGS),
            ("jekyll", ["build"]),
            (
                "rsync",
                [
                    "-avz",
                    "--delete",
                    "--delete-excluded",
                    "--include=*.htaccess",
                    "dist/",
                    "user@server.com:path/to/public_html/",
                ],
            ),
            ("jekyll", ["clean"]),
        ]

    def test_sync_failure_still_cleans(self, task_ctx, invoker):
        invoker.exit_codes["rsync"] = 23

        with pytest.raises(ExternalToolError) as exc_info:
            site.deploy(task_ctx)

        assert exc_info.value.message == "Deploy failed: rsync error"
        assert exc_info.value.returncode == 23
        assert invoker.calls[-1] == ("jekyll", ["clean"])
        assert invoker.count("jekyll", "clean") == 2

    def test_build_failure_skips_sync(self, task_ctx, invoker):
        invoker.exit_codes["jekyll build"] = 1

        with pytest.raises(ExternalToolError):
            site.deploy(task_ctx)

        assert invoker.count("rsync") == 0

    def test_uses_configured_target(self, task_ctx, invoker):
        settings = SitectlSettings(deploy={"user": "web", "host": "example.org", "path": "/srv/www/"})
        ctx = replace(task_ctx, settings=settings)

        site.deploy(ctx)

        rsync_args = next(a for t, a in invoker.calls if t == "rsync")
        assert rsync_args[-1] == "web@example.org:/srv/www/"


class TestServeTasks:
    def test_dev_runs_server_and_bundler_as_pair(self, task_ctx, invoker):
        site.dev(task_ctx)

        assert invoker.events[:2] == [("start", "jekyll"), ("start", "esbuild")]
        assert invoker.calls == [
            (
                "jekyll",
                [
                    "serve",
                    "--host",
                    "0.0.0.0",
                    "--watch",
                    "--force_polling",
                    "--livereload",
                    "--incremental",
                    "--config",
                    "_config.yml,_config_dev.yml",
                ],
            ),
            ("esbuild", [*BUNDLE_ARGS, "--watch"]),
        ]

    def test_watch_runs_build_watch_and_bundler(self, task_ctx, invoker):
        site.watch(task_ctx)

        assert invoker.calls == [
            ("jekyll", ["build", "--watch", "--force_polling"]),
            ("esbuild", [*BUNDLE_ARGS, "--watch"]),
        ]

    def test_preview_uses_host_and_port(self, task_ctx, invoker):
        site.preview(task_ctx)

        assert invoker.calls == [
            ("jekyll", ["serve", "--watch", "--host", "192.168.1.126", "--port", "3000"])
        ]

    def test_clean(self, task_ctx, invoker):
        site.clean(task_ctx)
        site.clean(task_ctx)

        assert invoker.calls == [("jekyll", ["clean"]), ("jekyll", ["clean"])]


class TestBackup:
    def test_archive_name_uses_directory_and_date(self, task_ctx):
        ctx = replace(task_ctx, today=lambda: date(2024, 3, 5))

        assert backup.archive_name(ctx) == "mysite-05-03-2024.7z"

    def test_cleans_then_archives(self, task_ctx, invoker, project_dir):
        ctx = replace(task_ctx, today=lambda: date(2024, 3, 5))

        backup.backup(ctx)

        assert invoker.calls == [
            ("jekyll", ["clean"]),
            (
                "7z",
                [
                    "a",
                    "-t7z",
                    "-mx=9",
                    "-m0=LZMA2",
                    "-mmt=on",
                    "-x!mysite/dist",
                    "-x!mysite/node_modules",
                    "./mysite-05-03-2024.7z",
                    str(project_dir),
                ],
            ),
        ]

    def test_archive_failure_message(self, task_ctx, invoker):
        invoker.exit_codes["7z"] = 2

        with pytest.raises(ExternalToolError) as exc_info:
            backup.backup(task_ctx)

        assert exc_info.value.message == "Backup failed: 7z error"


class TestComposeTasks:
    def test_up_fixes_permissions_then_starts(self, task_ctx, invoker):
        compose.up(task_ctx)

        assert invoker.calls == [
            ("sudo", ["chmod", "-R", "777", "."]),
            ("docker-compose", ["up", "-d"]),
        ]

    def test_up_without_permission_fix(self, task_ctx, invoker):
        settings = SitectlSettings(docker={"fix_permissions": False})
        ctx = replace(task_ctx, settings=settings)

        compose.up(ctx)

        assert invoker.calls == [("docker-compose", ["up", "-d"])]

    def test_down(self, task_ctx, invoker):
        compose.down(task_ctx)

        assert invoker.calls == [("docker-compose", ["down"])]

    def test_bash_execs_into_service(self, task_ctx, invoker):
        compose.bash(task_ctx)

        assert invoker.calls == [("docker-compose", ["exec", "jekyll", "bash"])]

    def test_prune(self, task_ctx, invoker):
        compose.prune(task_ctx)

        assert invoker.calls == [("docker", ["system", "prune", "-af", "--volumes"])]
