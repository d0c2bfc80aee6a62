"""Locations and the route to the military base."""

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """A stop along the route."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(min_length=1, description="Location name")
    description: str = Field(default="", description="Flavor text shown on arrival")
    danger_level: int = Field(
        ge=0, le=100, default=30, description="Percentage chance that arrival triggers a random event"
    )


class Route(BaseModel):
    """Ordered locations from the starting camp to the boss location. It does not change during the game."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    locations: list[Location] = Field(min_length=1, description="Locations in travel order")

    @property
    def final_index(self) -> int:
        """Index of the boss location."""
        return len(self.locations) - 1

    def __len__(self) -> int:
        return len(self.locations)

    def get(self, index: int) -> Location:
        """
        Get location by index.

        Raises:
            IndexError: If index is outside the route
        """
        if not 0 <= index < len(self.locations):
            raise IndexError(f"Route has no location at index {index}")
        return self.locations[index]

    def is_final(self, index: int) -> bool:
        return index == self.final_index


def build_default_route() -> Route:
    """The eight-stop journey from Start Camp to the Military Base."""
    return Route(
        locations=[
            Location(name="Start Camp", description="You wake up among ruined tents...", danger_level=10),
            Location(name="Abandoned House", description="Boarded windows; something moves inside.", danger_level=40),
            Location(name="Dark Forest", description="Trees close around you...", danger_level=60),
            Location(name="Riverside Tunnel", description="Echoes and damp stone.", danger_level=50),
            Location(name="Gas Station", description="Broken pumps and scattered crates.", danger_level=20),
            Location(name="Burnt Town", description="Ash and burned cars.", danger_level=65),
            Location(name="Highway Overpass", description="Long and exposed.", danger_level=45),
            Location(name="Military Base", description="Massive gates. Final hope.", danger_level=80),
        ]
    )
