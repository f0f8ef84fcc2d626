"""Domain layer of the nutrition tracker.

- nutrition_targets: daily calorie and macro targets from a profile
- nutrition_log: saved nutrition plans and user settings
- food_analysis: results of the hosted food photo model

Pure business logic, decoupled from GraphQL/REST and infrastructure.
"""
