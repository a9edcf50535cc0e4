"""Basic usage examples for the OpenWeatherMap client."""

import asyncio
import os

from owm import AsyncWeatherClient, NotFoundError, WeatherClient


def main() -> None:
    api_key = os.environ["OPENWEATHER_API_KEY"]

    with WeatherClient(api_key) as owm:
        print("=== Geocoding ===")
        try:
            coords = owm.resolve_coordinates("Chennai")
        except NotFoundError:
            print("  City not found.")
            return
        print(f"  {coords.name}, {coords.country}: {coords.lat:.4f}, {coords.lon:.4f}")

        print("\n=== Current conditions ===")
        current = owm.fetch_current_conditions(coords.lat, coords.lon)
        print(f"  {current.main.temp:.0f}°C, {current.condition.description}")
        print(f"  Local time: {current.local_time:%Y-%m-%d %H:%M}")

    print("\n=== Forecast (async, both calls in parallel) ===")
    asyncio.run(forecast_async(api_key, coords.lat, coords.lon))


async def forecast_async(api_key: str, lat: float, lon: float) -> None:
    async with AsyncWeatherClient(api_key) as owm:
        current, forecast = await asyncio.gather(
            owm.fetch_current_conditions(lat, lon),
            owm.fetch_forecast(lat, lon),
        )
    print(f"  Now: {current.main.temp:.0f}°C")
    for point in forecast.points[:5]:
        print(f"  {point.dt_txt}  {point.main.temp:5.1f}°C  pop {point.pop:.0%}")


if __name__ == "__main__":
    main()
