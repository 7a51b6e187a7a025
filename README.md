# fieldrobot

Building blocks for the control software of an autonomous field robot.

- **Geometry**: angle helpers (`fieldrobot.angle`), points and path point
  records (`fieldrobot.point`), line segments (`fieldrobot.line`), circular
  arcs (`fieldrobot.arc`), polygons (`fieldrobot.polygon`) and 4x4 homogeneous
  transforms built with numpy (`fieldrobot.transform`).
- **Files**: finding a file by extension below a directory
  (`fieldrobot.fileutil`) and reading point series from the x and y columns of
  a CSV file (`fieldrobot.pointdata`).
- **Command line and logging**: a small option parser (`fieldrobot.cmdline`)
  and a process-wide log file with one-step size rotation
  (`fieldrobot.logger`).
- **GNSS corrections**: an NTRIP client that forwards RTCM data to a receiver
  object and sends it the receiver's GGA sentences (`fieldrobot.ntrip`).
- **Job supervision**: job state and commands (`fieldrobot.jobdata`,
  `fieldrobot.job`), local programs started from the search path
  (`fieldrobot.process`) and containers managed through the Docker Engine HTTP
  API (`fieldrobot.docker`, `fieldrobot.addon`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Examples

Angles and lines:

```python
from fieldrobot.angle import calc_smallest_angle, constrain_angle
from fieldrobot.line import Line
from fieldrobot.point import Point

calc_smallest_angle(350.0, 10.0)   # -20.0
constrain_angle(-90.0)             # 270.0

line = Line(Point(0.0, 0.0), Point(10.0, 0.0))
line.alpha()                       # 0.0 degrees
line.distance(Point(5.0, 3.0))     # 3.0
line.left(Point(5.0, 3.0))         # True
```

Rounding a corner with an arc and sampling it:

```python
from fieldrobot.arc import Arc

first = Line(Point(0.0, 0.0), Point(10.0, 0.0))
second = Line(Point(10.0, 0.0), Point(10.0, 10.0))
arc = Arc.from_lines(first, second, radius=2.0)
points = arc.interpolate(0.1)      # CurvyPoint objects, ending at arc.stop
```

Reading a point series from a CSV file (column names match in any case;
`load` raises `ValueError` for a wrong extension or missing columns and
`FileNotFoundError` for a missing file):

```python
from fieldrobot.pointdata import PointCsvFile

data = PointCsvFile(polygon=True)
data.load("field.csv", ["x", "easting"], ["y", "northing"])
data.num_points(0)
data.is_polygon(0)
```

Basic authentication for an NTRIP caster:

```python
from fieldrobot.ntrip import NtripCredentials, build_request, encode_credentials

user = "user"
password = "password"
encode_credentials(user, password)
request = build_request(
    NtripCredentials("caster.example.com", 2101, user, password, "MOUNT")
)
```

`Ntrip` takes the credentials and any object with `get_gga_line()` and
`write_rtcm(data)` methods; call `connect()`, `init()` and then `run()`.

Talking to Docker: every `DockerClient` call returns a dict with `success`,
`code` and `data`; a transport failure gives code 0.

```python
from fieldrobot.docker import DockerClient

client = DockerClient()            # local socket /var/run/docker.sock
client.list_containers(all=True)
```

Logging: `LoggerStream` writes to `$ILVO_PATH/logs/<name>.log` and raises
`RuntimeError` when that environment variable is not set.

```python
from fieldrobot.logger import LoggerStream, LogLevel

logger = LoggerStream.create_instance("my-process")
logger.log(LogLevel.INFO, "started")
```

## What this package does not do

The package is a library only; it installs no commands. It does not read NMEA
sentences from a GNSS receiver, read shapefiles, store variables in a shared
database, or run the navigation, implement-control, simulation or
system-manager loops of a robot. The job classes (`IlvoProcess`, `IlvoAddon`)
start, stop and check one job each; keeping a set of jobs running is left to
the caller.