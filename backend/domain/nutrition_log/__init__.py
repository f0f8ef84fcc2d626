"""Nutrition log domain - saved nutrition plans and user settings."""
