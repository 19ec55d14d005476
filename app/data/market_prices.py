# Mock mandi price data (INR per quintal)

MOCK_MARKET_DATA = [
    {
        "commodity": "Wheat",
        "commodity_hi": "गेहूं",
        "market": "Delhi Mandi",
        "state": "Delhi",
        "district": "Delhi",
        "min_price": 2200,
        "max_price": 2450,
        "modal_price": 2325,
        "change": 25,
        "change_percent": 1.09
    },
    {
        "commodity": "Rice",
        "commodity_hi": "चावल",
        "market": "Mumbai Mandi",
        "state": "Maharashtra",
        "district": "Mumbai",
        "min_price": 3200,
        "max_price": 3600,
        "modal_price": 3400,
        "change": -50,
        "change_percent": -1.45
    },
    {
        "commodity": "Pulses",
        "commodity_hi": "दालें",
        "market": "Jaipur Mandi",
        "state": "Rajasthan",
        "district": "Jaipur",
        "min_price": 4500,
        "max_price": 5200,
        "modal_price": 4850,
        "change": 0,
        "change_percent": 0
    },
    {
        "commodity": "Cotton",
        "commodity_hi": "कपास",
        "market": "Ahmedabad Mandi",
        "state": "Gujarat",
        "district": "Ahmedabad",
        "min_price": 6800,
        "max_price": 7500,
        "modal_price": 7150,
        "change": 150,
        "change_percent": 2.14
    },
    {
        "commodity": "Sugarcane",
        "commodity_hi": "गन्ना",
        "market": "Lucknow Mandi",
        "state": "Uttar Pradesh",
        "district": "Lucknow",
        "min_price": 320,
        "max_price": 385,
        "modal_price": 350,
        "change": 10,
        "change_percent": 2.94
    }
]
