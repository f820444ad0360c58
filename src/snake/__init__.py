"""Grid snake game: simulation, screen controller and pygame front end."""
