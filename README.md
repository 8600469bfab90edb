# pointmap

pointmap keeps a list of described points on a map. A shared state holds the
saved points and one "current" point. A click on the map makes the clicked
location the current point. A form edits the current point's latitude,
longitude and description and saves it as a new point or as changes to a
point that is being edited. A list shows every saved point and lets you edit
or delete it.

## Installation

```
pip install .
```

Python 3.10 or later is required. The package has no other dependencies.
To run the tests, install the `test` extra (`pip install .[test]`) and run
`pytest`.

## Command line

```
pointmap
```

This starts the app with its two initial points, "BASE 1" (50.05679, 6.02565)
and "BASE 2" (49.61098, 6.13353), and prints a plain-text view: the panel
title, the form fields and buttons, the list of added points, the map centre
and zoom, and one line per marker. `pointmap --help` shows the usage; the
command takes no other options.

## Using the library

```python
from pointmap.state import Store, GlobalState, default_points
from pointmap.actions import PointActions
from pointmap.form import EditSession, PointForm
from pointmap.point_list import PointList
from pointmap.map_view import MapView

store = Store(GlobalState(points_list=default_points()))
actions = PointActions(store)
session = EditSession()
form = PointForm(actions, session)
points = PointList(actions, session)
view = MapView(store)

view.click(49.6, 6.1)              # the clicked spot becomes the current point
form.input_description("Depot")
form.save()                        # adds a new point, clears the current one

saved = actions.points_list()[-1]
points.edit(saved)                 # start editing the saved point
form.input_lat("49.7")
form.save()                        # stores the changes to that point

for marker in view.markers():
    print(marker.lat, marker.lng, marker.description)
```

### Main pieces

- `pointmap.types.MapPoint`: a point with `lat`, `lng`, `description`, a
  random `id` and an `updated_at` time in UTC. `update_timestamp()` sets
  `updated_at` to now.
- `pointmap.state.GlobalState`: `points_list` and `current_point`.
- `pointmap.state.Store`: holds a `GlobalState`. `get()` returns a deep
  copy, `update(mutate)` applies `mutate` to the state and then calls every
  callback registered with `subscribe(callback)`; `subscribe` returns a
  function that removes the callback. `default_points()` gives the two
  initial points.
- `pointmap.actions.PointActions`: `add_point`, `update_point`,
  `delete_point`, `set_current_point`, `update_current_point_lat`,
  `update_current_point_lng`, `update_current_point_description`,
  `clear_current_point`, and copies through `current_point()` and
  `points_list()`. Adding or updating a point clears the current point.
  Setting a coordinate with no current point creates one at that coordinate
  and 0 for the other; setting a description with no current point does
  nothing.
- `pointmap.form.EditSession`: `is_editing` and `editing_id`, changed with
  `start(point_id)` and `stop()`.
- `pointmap.form.PointForm`: `input_lat`, `input_lng` and
  `input_description` handle typed text (coordinate text that is not a plain
  decimal number is ignored); `save()` and `cancel()`; `lat_value()`,
  `lng_value()`, `description_value()`, `button_label()` ("Add Point" or
  "Save Changes") and `shows_cancel()` describe what the form shows. While a
  point is being edited the form takes the current point's description
  whenever the state or the session changes. `format_number` formats
  coordinates for display.
- `pointmap.point_list.PointList`: `entries()` gives one `PointListEntry`
  per saved point (with a `key` of id and update time), `edit(point)` loads a
  copy of the point into the form and starts editing, `delete(point_id)`
  removes it.
- `pointmap.map_view.MapView`: `click(lat, lng)`, `markers()` (one `Marker`
  per saved point) and `highlight()`, the centre of the circle around the
  current point or `None`. The map is centred on (49.7425, 6.1) at zoom 8.
- `pointmap.manager.PointManager`: a form and a list sharing one
  `EditSession`; `title()` is "Edit Point" while editing and
  "Add Point to Map" otherwise.
- `pointmap.app.App`: builds the store (with the initial points unless a
  store is given), the manager and the map view; `render()` returns the text
  view printed by the command.

## What it does not do

pointmap has no graphical or web interface: it draws no map tiles and takes
no real mouse clicks. Clicks and typed input are method calls, and the view
is the plain text from `App.render()`. Points live only in memory; nothing is
saved to disk between runs.