"""Geography domain - city / district / subdistrict taxonomy"""
