"""
Pydantic models for weather forecasts and farm advisories
"""
from datetime import datetime
from typing import List, Literal
from pydantic import BaseModel, Field


class Location(BaseModel):
    name: str
    state: str
    district: str
    lat: float
    lng: float


class CurrentWeather(BaseModel):
    temperature: int
    feels_like: int
    humidity: int = Field(..., ge=0, le=100)
    wind_speed: int
    wind_direction: str
    pressure: int
    visibility: int
    uv_index: int
    condition: str
    last_updated: datetime


class ForecastDay(BaseModel):
    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    day_name: str
    high: int
    low: int
    condition: str
    rainfall: int = Field(0, ge=0, description="Rainfall in mm")
    humidity: int = Field(..., ge=0, le=100)
    wind_speed: int


class Advisory(BaseModel):
    type: Literal['irrigation', 'fertilizer', 'pest', 'harvest', 'sowing']
    title: str
    description: str
    priority: Literal['high', 'medium', 'low']
    valid_until: datetime


class WeatherReport(BaseModel):
    location: Location
    current: CurrentWeather
    forecast: List[ForecastDay] = Field(default_factory=list)
    advisories: List[Advisory] = Field(default_factory=list)
