"""
A two-line shell prompt with Git & Mercurial awareness

``promptline`` prints a compact, colored summary of your shell session for use
as a command prompt::

    ┌[14:02]-[alice]-[firefly]-[~/work/proj]-[0]-[main 1a2b3c4d5e6f7a]
    └>

Features:

- Shows the time, user, hostname, and current directory
- Shows the exit status of the previous command, in green or red
- Lets you know when you're inside a Docker container or a Nix shell
- Shows the current Git branch & commit by reading the repository's metadata
  directly, so it never has to spawn ``git``
- Shows the current Mercurial bookmark, branch, & revision
- Set ``DEBUG_PROMPTLINE=1`` to see why a segment is missing

Bash setup::

    PROMPT_COMMAND='PS1="$(promptline --bash $?)"'
"""

__version__ = "0.3.0"
__license__ = "MIT"
