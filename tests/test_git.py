import subprocess
import unittest
from unittest.mock import MagicMock, patch

from gitsw.exceptions import GitError, GitTimeoutError, SwitchError
from gitsw.git import (
    Deadline,
    get_current_branch,
    list_branches,
    list_local_branches,
    list_remote_branches,
    switch_branch,
)


def completed(returncode=0, stdout="", stderr=""):
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    result.args = ["git"]
    return result


class TestListBranches(unittest.TestCase):
    @patch("subprocess.run")
    def test_local_branches_sorted_and_blank_lines_dropped(self, mock_run):
        mock_run.return_value = completed(stdout="zeta\n\nmain\nfeature/auth\n")

        self.assertEqual(list_local_branches(), ["feature/auth", "main", "zeta"])

        args = mock_run.call_args[0][0]
        self.assertEqual(
            args, ["git", "for-each-ref", "--format=%(refname:short)", "refs/heads"]
        )

    @patch("subprocess.run")
    def test_remote_branches_skip_symbolic_head(self, mock_run):
        """origin/HEAD and the bare 'origin' alias never show up."""
        mock_run.return_value = completed(
            stdout="origin\norigin/HEAD\norigin/main\nupstream/feature/x\norigin/dev\n"
        )

        branches = list_remote_branches()

        self.assertEqual(branches, ["origin/dev", "origin/main", "upstream/feature/x"])
        self.assertNotIn("origin/HEAD", branches)
        self.assertEqual(mock_run.call_args[0][0][-1], "refs/remotes")

    @patch("subprocess.run")
    def test_listing_failure_carries_stderr(self, mock_run):
        mock_run.return_value = completed(
            returncode=128,
            stderr="fatal: not a git repository (or any of the parent directories): .git\n",
        )

        with self.assertRaises(GitError) as ctx:
            list_local_branches()

        self.assertEqual(ctx.exception.exit_code, 128)
        self.assertIn("not a git repository", str(ctx.exception))

    @patch("subprocess.run", side_effect=FileNotFoundError("git"))
    def test_missing_git_executable(self, mock_run):
        with self.assertRaises(GitError) as ctx:
            list_local_branches()
        self.assertIn("git executable not found", str(ctx.exception))

    @patch("subprocess.run")
    def test_subprocess_timeout_becomes_git_timeout_error(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd=["git"], timeout=1)

        with self.assertRaises(GitTimeoutError):
            list_local_branches(Deadline(1))

    @patch("subprocess.run")
    def test_queries_share_one_deadline(self, mock_run):
        mock_run.side_effect = [
            completed(stdout="main\n"),
            completed(stdout="origin/main\n"),
            completed(stdout="main\n"),
        ]

        listing = list_branches(local=True, remote=True, timeout=5)

        self.assertEqual(listing.local, ["main"])
        self.assertEqual(listing.remote, ["origin/main"])
        self.assertEqual(listing.current, "main")
        timeouts = [call.kwargs["timeout"] for call in mock_run.call_args_list]
        self.assertEqual(len(timeouts), 3)
        for timeout in timeouts:
            self.assertGreater(timeout, 0)
            self.assertLessEqual(timeout, 5)
        self.assertEqual(timeouts, sorted(timeouts, reverse=True))

    @patch("subprocess.run")
    def test_remote_only_listing_skips_local_query(self, mock_run):
        mock_run.side_effect = [
            completed(stdout="origin/main\n"),
            completed(stdout="main\n"),
        ]

        listing = list_branches(local=False, remote=True)

        self.assertEqual(listing.local, [])
        self.assertEqual(mock_run.call_count, 2)

    def test_expired_deadline_raises_before_running(self):
        deadline = Deadline(5)
        deadline.expires_at = 0

        with patch("subprocess.run") as mock_run:
            with self.assertRaises(GitTimeoutError):
                list_local_branches(deadline)
            mock_run.assert_not_called()


class TestCurrentBranch(unittest.TestCase):
    @patch("subprocess.run")
    def test_current_branch(self, mock_run):
        mock_run.return_value = completed(stdout="feature/auth\n")
        self.assertEqual(get_current_branch(), "feature/auth")

    @patch("subprocess.run")
    def test_detached_head_is_not_an_error(self, mock_run):
        mock_run.return_value = completed(returncode=1)
        self.assertIsNone(get_current_branch())

    @patch("subprocess.run")
    def test_outside_repository_fails(self, mock_run):
        mock_run.return_value = completed(returncode=128, stderr="fatal: not a git repository\n")
        with self.assertRaises(GitError):
            get_current_branch()


class TestSwitchBranch(unittest.TestCase):
    @patch("subprocess.run")
    def test_switch_streams_output(self, mock_run):
        mock_run.return_value = completed()

        switch_branch("feature/auth")

        mock_run.assert_called_once_with(["git", "switch", "feature/auth"])

    @patch("subprocess.run")
    def test_previous_branch_token(self, mock_run):
        mock_run.return_value = completed()

        switch_branch("-")

        mock_run.assert_called_once_with(["git", "switch", "-"])

    @patch("subprocess.run")
    def test_failed_switch_keeps_exit_code(self, mock_run):
        mock_run.return_value = completed(returncode=128)

        with self.assertRaises(SwitchError) as ctx:
            switch_branch("nope")

        self.assertEqual(ctx.exception.exit_code, 128)
        mock_run.assert_called_once()

    @patch("subprocess.run")
    def test_option_like_branch_is_rejected(self, mock_run):
        with self.assertRaises(ValueError):
            switch_branch("-f")
        with self.assertRaises(ValueError):
            switch_branch("")
        mock_run.assert_not_called()


if __name__ == "__main__":
    unittest.main()
