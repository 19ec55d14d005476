# Locations and advisories served by the mock weather source

WEATHER_LOCATIONS = [
    {"name": "Delhi", "state": "Delhi", "district": "Central Delhi", "lat": 28.6139, "lng": 77.2090},
    {"name": "Mumbai", "state": "Maharashtra", "district": "Mumbai City", "lat": 19.0760, "lng": 72.8777},
    {"name": "Jaipur", "state": "Rajasthan", "district": "Jaipur", "lat": 26.9124, "lng": 75.7873},
    {"name": "Ahmedabad", "state": "Gujarat", "district": "Ahmedabad", "lat": 23.0225, "lng": 72.5714},
    {"name": "Lucknow", "state": "Uttar Pradesh", "district": "Lucknow", "lat": 26.8467, "lng": 80.9462}
]

WEATHER_CONDITIONS = ["Clear", "Partly Cloudy", "Cloudy", "Light Rain"]

WIND_DIRECTIONS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]

# valid_days: how long the advisory stays valid from the time of the report
WEATHER_ADVISORIES = [
    {
        "type": "irrigation",
        "title": "Irrigation Recommended",
        "description": "Current soil moisture levels indicate need for irrigation in the next 2-3 days.",
        "priority": "medium",
        "valid_days": 3
    },
    {
        "type": "fertilizer",
        "title": "Optimal Fertilizer Application",
        "description": "Weather conditions are favorable for nitrogen fertilizer application.",
        "priority": "high",
        "valid_days": 2
    },
    {
        "type": "pest",
        "title": "Pest Alert",
        "description": "High humidity may increase pest activity. Monitor crops regularly.",
        "priority": "low",
        "valid_days": 5
    }
]
