# Utils package - Utility modules organized by domain
