"""Coin balance lookup and admin management API."""
