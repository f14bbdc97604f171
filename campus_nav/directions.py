"""
Turn-by-turn walking directions for a computed campus path.

Each consecutive pair of locations becomes one step with a compass heading
and a distance. Step distances come from the walkway graph when it has the
edge, otherwise from great-circle geometry.
"""

import csv
import json
from dataclasses import asdict, dataclass
from pathlib import Path as FilePath
from typing import List, Optional

from .geo import bearing_to_compass, calculate_bearing
from .graph import Graph
from .path import Path


@dataclass
class DirectionStep:
    """A single walking instruction."""

    step_number: int
    instruction: str
    from_name: str
    to_name: str
    bearing_deg: float
    heading: str
    distance_m: float
    cumulative_distance_m: float


class DirectionsGenerator:
    """
    Generate walking directions from a Path.
    """

    def __init__(self, path: Path, graph: Optional[Graph] = None):
        """
        Initialize directions generator.

        Args:
            path: Route to describe
            graph: Optional walkway graph keyed by location id, used for
                step distances
        """
        self.path = path
        self.graph = graph

    def generate_instructions(self) -> List[DirectionStep]:
        """
        Generate one step per hop of the path.

        Returns:
            List of DirectionStep objects (empty for paths shorter than two)
        """
        steps: List[DirectionStep] = []
        cumulative = 0.0
        locations = self.path.locations
        last_index = len(locations) - 2

        for i, (origin, dest) in enumerate(zip(locations, locations[1:])):
            distance = self._step_distance(origin, dest)
            cumulative += distance
            bearing = calculate_bearing(origin.coordinate, dest.coordinate)
            heading = bearing_to_compass(bearing)

            steps.append(
                DirectionStep(
                    step_number=i + 1,
                    instruction=self._instruction_text(heading, distance, dest.name, i == last_index),
                    from_name=origin.name,
                    to_name=dest.name,
                    bearing_deg=round(bearing, 1),
                    heading=heading,
                    distance_m=round(distance, 2),
                    cumulative_distance_m=round(cumulative, 2),
                )
            )

        return steps

    def _step_distance(self, origin, dest) -> float:
        if self.graph is not None and self.graph.has_edge(origin.id, dest.id):
            return self.graph.edge_weight(origin.id, dest.id)
        return origin.distance_to(dest)

    @staticmethod
    def _instruction_text(heading: str, distance: float, dest_name: str, is_last: bool) -> str:
        text = f"Head {heading} for {distance:.0f} m"
        if is_last:
            return f"{text} and arrive at {dest_name}"
        return f"{text} to {dest_name}"

    def format_text(self) -> str:
        steps = self.generate_instructions()
        if not steps:
            return "You are already at your destination."
        return "\n".join(f"{s.step_number:>2}. {s.instruction}" for s in steps)

    def export_to_json(self, output_file) -> None:
        """Write steps plus a route summary as JSON."""
        payload = {
            "route": self.path.names(),
            "total_distance_m": round(self.path.total_distance, 2),
            "steps": [asdict(step) for step in self.generate_instructions()],
        }
        with open(FilePath(output_file), "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)

    def export_to_csv(self, output_file) -> None:
        steps = self.generate_instructions()
        fieldnames = list(DirectionStep.__dataclass_fields__)
        with open(FilePath(output_file), "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in steps:
                writer.writerow(asdict(step))


def generate_directions(path: Path, graph: Optional[Graph] = None) -> List[DirectionStep]:
    """Convenience wrapper around DirectionsGenerator."""
    return DirectionsGenerator(path, graph).generate_instructions()
