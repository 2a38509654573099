route53client = "0.1.0"
