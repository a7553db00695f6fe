"""Interactive terminal menu for searching weather and managing favorites."""

import sys
import time

from weather_cli.config import Settings
from weather_cli.favorites.store import FavoritesError, FavoritesStore, PositionError
from weather_cli.logging_config import logger
from weather_cli.models.weather import WeatherReading
from weather_cli.weather_service.weather import (
    WeatherServiceError,
    fetch_coordinates,
    fetch_weather,
)

BACK = "-1"
RULE = "======================"


class MenuController:
    """Main menu loop. Holds the favorites list and the exit flag."""

    def __init__(
        self,
        settings: Settings,
        favorites: FavoritesStore | None = None,
        input_func=input,
        out=None,
        err=None,
        sleep=time.sleep,
    ):
        self.settings = settings
        self.favorites = favorites if favorites is not None else FavoritesStore()
        self.exit_requested = False
        self._input = input_func
        self._out = out or sys.stdout
        self._err = err or sys.stderr
        self._sleep = sleep
        self._actions = {
            "1": self.search_city,
            "2": self.add_favorite,
            "3": self.delete_favorite,
            "4": self.show_favorites,
            "5": self.request_exit,
        }

    def run(self) -> int:
        """Loop over the main screen until exit is chosen. Returns the exit code."""
        logger.info("MENU_STARTED")
        while not self.exit_requested:
            try:
                try:
                    self.main_screen()
                except UnicodeDecodeError as exc:
                    logger.warning("UNDECODABLE_INPUT", error=str(exc))
                    self._error("Invalid input. Please use UTF-8 text.")
                if self.settings.redraw_delay_s > 0:
                    self._sleep(self.settings.redraw_delay_s)
            except (EOFError, KeyboardInterrupt):
                self._print()
                self.request_exit()
                break
        self._print("Exiting program.")
        logger.info("MENU_EXITED")
        return 0

    def main_screen(self) -> None:
        self._header("Main Screen")
        self._print("Hello, welcome to my application.\n")
        self._print("Please enter a number corresponding to an action below.")
        self._print("1. Search for a city's weather.")
        self._print("2. Add to your favorite cities.")
        self._print("3. Delete from your favorite cities.")
        self._print("4. View weather of your favorite cities.")
        self._print("5. Exit program.")

        choice = self._prompt("Enter '1', '2', '3', '4', or '5': ")
        action = self._actions.get(choice)
        if action is None:
            self._print("Invalid choice, please try again.")
            return
        action()

    def search_city(self) -> None:
        self._header("City Search")
        self._print("Enter the name of the city or '-1' to go back to the main screen.")
        city_name = self._prompt("City Name: ")
        if city_name == BACK:
            return

        try:
            geo = fetch_coordinates(city_name, self.settings)
            reading = fetch_weather(geo.latitude, geo.longitude, self.settings)
        except WeatherServiceError as exc:
            logger.warning("SEARCH_FAILED", city=city_name, error=str(exc))
            self._error(f"Error: {exc}")
            return

        self._print(f"Weather Data for {city_name}:")
        self._print_reading(reading)

    def add_favorite(self) -> None:
        self._header("Add City")
        self._list_favorites()
        self._print(
            "Please type the name of the city you wish to add, "
            "or press '-1' to go back to the main screen."
        )
        city_name = self._prompt("City Name: ")
        if city_name == BACK:
            return

        # Full list is rejected before any geocoding request is made.
        if self.favorites.is_full:
            self._print("Cannot add city: Favorites list is full.")
            return

        try:
            geo = fetch_coordinates(city_name, self.settings)
            self.favorites.add(city_name, geo)
        except (WeatherServiceError, FavoritesError) as exc:
            logger.warning("ADD_FAVORITE_FAILED", city=city_name, error=str(exc))
            self._error(f"Error adding favorite: {exc}")
            return
        self._print(f"Favorite successfully added: {city_name}")

    def delete_favorite(self) -> None:
        self._header("Delete City")
        if not len(self.favorites):
            self._print("No favorite cities to delete")
            return

        self._list_favorites()
        self._print(
            "Please type the number of the city you wish to delete, "
            "or press '-1' to go back to the main screen."
        )
        choice = self._prompt("City Number: ")
        if choice == BACK:
            return
        if not choice.isdecimal():
            self._error("Invalid input. Please enter a valid number.")
            return

        try:
            self.favorites.remove(int(choice))
        except PositionError:
            self._print("Number out of bounds. Please try again.")
            return
        self._print("City successfully deleted.")

    def show_favorites(self) -> None:
        self._header("Favorite Cities")
        if not len(self.favorites):
            self._print("No favorite cities to display.")
            return

        for city in self.favorites.list():
            self._print(f"City Name: {city.name}")
            try:
                reading = fetch_weather(city.latitude, city.longitude, self.settings)
            except WeatherServiceError as exc:
                logger.warning("FAVORITE_WEATHER_FAILED", city=city.name, error=str(exc))
                self._error(f"Error: {exc}")
                continue
            self._print_reading(reading)

    def request_exit(self) -> None:
        self.exit_requested = True

    def _list_favorites(self) -> None:
        self._print("Current favorite cities: ")
        for position, city in enumerate(self.favorites.list(), start=1):
            self._print(f"{position}. {city.name}")

    def _print_reading(self, reading: WeatherReading) -> None:
        for label, value in reading.labeled():
            self._print(f"{label}: {value:g}")
        self._print()

    def _header(self, title: str) -> None:
        self._print(f"{RULE} {title} {RULE}")

    def _prompt(self, text: str) -> str:
        self._out.write(text)
        self._out.flush()
        return self._input()

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def _error(self, text: str) -> None:
        self._out.flush()
        print(text, file=self._err)
