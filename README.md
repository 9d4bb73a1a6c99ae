# winix

Familiar Unix commands for Windows and other platforms. It also has a
terminal dashboard that shows system, process, memory, disk, sensor, file
and Git information.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### `winix`

Starts the full-screen dashboard. It has seven tabs: System, Processes,
Memory, Disks, Sensors, Files and Git. The data on screen is fetched again
every 10 seconds, or straight away when you press R.

| Key | Action |
| --- | --- |
| Tab / → | Next tab |
| ← | Previous tab |
| H | Show or hide help |
| C | Open command mode (Esc closes it) |
| R | Refresh |
| Q | Quit |

Command mode has these built-in commands:

- `cd <dir>`: change directory.
- `pwd`: print the working directory.
- `ls`: list the files in the working directory.
- `uname`: show system information.
- `ps`: list processes.
- `free`: show memory use.
- `df`: show disk use.
- `uptime`: show how long the system has been running.
- `sensors`: show temperature sensors.
- `chmod <permissions> <file>`: see the note under "Limitations".
- `chown <owner> <file>`: see the note under "Limitations".
- `git ...`: run Git.
- `psh ...` or `powershell ...`: run a PowerShell command.
- `nice ...`: run a command at a chosen priority. Windows only.
- `clear`: clear the output.
- `help`: list the built-in commands.

Any other command goes to PowerShell.

### `sudo`

```
sudo <command> [args]
```

Runs a command with elevated rights. On Linux and macOS it calls the system
`sudo`. On Windows it asks PowerShell to start the command with the `runAs`
verb. It exits with the command's exit status. It exits with status 1 if you
give no command or if the command cannot be started.
`winix.sudo.build_command(args, platform)` returns the argument list that
would be run.

## Library use

Each command is also a module you can call from Python:

```python
from winix import tail, rm, touch, nice, ps, uname, uptime, sensors

print(tail.tail_sync(["log.txt"], 10), end="")   # last 10 lines of each file
touch.run(["new_file.txt"])   # create the file, or update its timestamps
rm.rm(["old_file.txt"])       # delete regular files; warn about anything else

ps.execute()        # top 25 processes by CPU use, then a system summary
uname.execute()     # system, CPU and per-interface network totals
uptime.execute()    # boot time, uptime and load averages
sensors.execute()   # component temperatures

nice.execute(["-n", "15", "ping", "localhost"])  # Windows only
```

### `winix.nice`

Maps Unix nice values to Windows priority classes. The values run from -20 to
19, and the default is +10. The increment is given as `-N` or as `-n N`. The
mapping is:

| Nice value | Priority class |
| --- | --- |
| -20 to -16 | Realtime |
| -15 to -11 | High |
| -10 to -6 | Above normal |
| -5 to 5 | Normal |
| 6 to 10 | Below normal |
| 11 to 19 | Idle |

`nice.NiceError` is raised in these cases:

- the arguments are invalid;
- the value is out of range;
- the command cannot be started;
- the platform is not Windows.

`parse_arguments`, `increment_to_windows_priority` and `build_command_line`
can be used on their own.

### `winix.tail`

- `tail_sync(files, lines)` returns the last lines of every file, one file
  after another.
- `tail_async(files, lines)` is an async generator. It yields the last lines
  of the first file only, as bytes.
- `tail_async_to_string(files, lines)` collects that output into a string.

Windows line endings are normalised to `\n`.

### `winix.pipeline`

- `AsyncCommand` is an abstract base with an async `execute(input)` method.
- `Pipeline(first, second)` feeds one command's output into the next.
- `execute_pipeline(command)` runs a command that takes no input.

### `winix.powershell`

`execute(args)` runs the arguments as a PowerShell command. It prefers `pwsh`
and falls back to `powershell`. With no arguments it prints a help page.
`interactive_mode()` reads commands from standard input until you type
`exit` or `quit`.

### `winix.process`

`spawn(exe_path, args, current_dir)` starts a program and returns a
`ProcessHandle`. You can `wait()` on the handle, `close()` it, or use it as a
context manager. `ProcessError` is raised in two cases:

- the program cannot be started;
- a string holds an embedded NUL, checked by `to_wide_null`.

### `winix.monitor` and `winix.shell`

`winix.monitor` builds the text snapshots that the dashboard shows. Among them
are `system_info()`, `process_list()`, `memory_info()`, `disk_info()` and
`sensor_info()`. `winix.shell.App` holds the dashboard state. It runs the
command-mode commands through `execute_command()`.

## Limitations

- In command mode, `chmod` and `chown` do not change permissions or
  ownership. They only check that the file exists and report the change.
- The `sensors` output depends on what `psutil` can read. On many systems,
  Windows and macOS among them, no temperature sensors are reported.
- `nice` works only on Windows. Elsewhere it raises `NiceError`.
- The `ps`, `uname` and `uptime` modules are plain functions that print.
  They are not installed as separate commands.
- The package has no `cat`, `grep` or `head` commands. `winix.pipeline`
  provides only the generic chaining of commands you write yourself.