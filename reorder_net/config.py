#////////////////////////////////////////////////////////////////////////////////#
# File:         config.py                                                        #
# Date:         2025-03-05                                                       #
# Description:  Configuration settings for the reorder classifier project.     #
#////////////////////////////////////////////////////////////////////////////////#


"""
Configuration settings for the inventory reorder classifier.
"""

# Feature ranges (inclusive integer bounds)
STOCK_RANGE = (0, 99)  # current inventory on hand
WEEKLY_SALES_RANGE = (5, 54)  # average units sold per week
LEAD_TIME_RANGE = (1, 7)  # replenishment lead time in days
DAYS_PER_WEEK = 7

# Feature order shared by training examples and catalog records
FEATURE_NAMES = ["current_inventory", "avg_sales_per_week", "lead_time_days"]

# Catalog settings
CATALOG_SIZE = 100
ITEM_NAME_OFFSET = 1000  # items are named Item-1001, Item-1002, ...

# Network architecture (fixed for the lifetime of a model)
NUM_FEATURES = 3
HIDDEN_DIM = 8
OUTPUT_DIM = 1

# Training settings
RANDOM_SEED = 42
TRAINING_BATCH_SIZE = 500
DEFAULT_EPOCHS = 30
DEFAULT_LEARNING_RATE = 0.05  # converges within 30 full-batch steps on raw features
PARITY_LEARNING_RATE = 0.001  # Adam default used by the browser demo with minibatches of 32
ADAM_BETAS = (0.9, 0.999)
ADAM_EPSILON = 1e-8

# Decision settings
DECISION_THRESHOLD = 0.5  # strictly greater than means reorder
REORDER = "Reorder"
HEALTHY = "Healthy"

# Logging settings
LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
