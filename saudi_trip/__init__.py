"""Saudi trip planner: streams LLM-generated itineraries."""
