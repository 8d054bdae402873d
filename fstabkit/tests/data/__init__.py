# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
