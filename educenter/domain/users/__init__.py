"""Users domain - accounts, roles and education center workers"""
