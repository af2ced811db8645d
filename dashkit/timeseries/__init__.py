"""Time series panels with their axis, color scheme, threshold and field settings."""