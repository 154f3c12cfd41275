import math

import matplotlib.pyplot as plt

from sunlight_engine.dates import format_date, format_time
from sunlight_engine.illuminance import apply_weather, daily_illuminance, illuminance_table
from sunlight_engine.model import Location, Weather
from sunlight_engine.state import SimulationController, SimulationState
from sunlight_engine.sunpath import sun_path_segments


def main():
    """
    ONE DAY OF SUNLIGHT IN KRAKÓW
    =============================
    Walks the simulation through a summer day, prints the sun's altitude and
    sky color every two hours, then draws the lux curve and the sun path.
    """

    # ========================================================================
    # SETUP
    # ========================================================================
    location = Location(50.06, 19.94, "Europe/Warsaw")
    doy = 172  # Jun 21, summer solstice
    weather = Weather.CLOUDY

    controller = SimulationController(SimulationState(date=doy, location=location,
                                                      weather=weather))

    print("=" * 60)
    print(f"{format_date(doy)} at {location.latitude:.2f}°N, {location.longitude:.2f}°E")
    print("=" * 60)

    # ========================================================================
    # STEP THROUGH THE DAY
    # ========================================================================
    for minute in range(0, 24 * 60, 120):
        controller.set_time(minute)
        frame = controller.frame()
        print(f"{format_time(minute)}  altitude {math.degrees(frame.altitude):6.1f}°  "
              f"sky {frame.sky.to_hex()}  light {frame.light.directional:.2f}")

    # ========================================================================
    # LUX CURVE
    # ========================================================================
    theoretical = daily_illuminance(doy, location)
    table = illuminance_table(apply_weather(theoretical, weather))
    clear = illuminance_table(theoretical)
    print()
    print(f"Peak (clear sky): {max(theoretical)} lux")
    print(f"Peak ({weather.value}):   {table['lux'].max()} lux")

    # ========================================================================
    # DRAW THE PICTURE
    # ========================================================================
    fig, (ax_lux, ax_path) = plt.subplots(1, 2, figsize=(12, 4))

    ax_lux.fill_between(clear['hour'], clear['lux'], alpha=0.2, label='Clear sky')
    ax_lux.plot(table['hour'], table['lux'], 'o-', label=weather.value)
    ax_lux.set_xlabel("Hour")
    ax_lux.set_ylabel("Illuminance (lux)")
    ax_lux.set_xlim(0, 24)
    ax_lux.legend()
    ax_lux.grid(True, alpha=0.3)

    # Top view: x east, -z north
    path = sun_path_segments(doy, location)
    for points in path.day:
        ax_path.plot(points[:, 0], -points[:, 2], color='orange', linewidth=2)
    for points in path.night:
        ax_path.plot(points[:, 0], -points[:, 2], color='navy', linestyle='--', alpha=0.5)
    ax_path.set_aspect('equal')
    ax_path.set_xlabel("East")
    ax_path.set_ylabel("North")
    ax_path.set_title(f"Sun path, {format_date(doy)}")
    ax_path.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.show()

if __name__ == "__main__":
    main()
