"""Conversions from crossterm- and termion-style terminal events into backend-agnostic inputs."""