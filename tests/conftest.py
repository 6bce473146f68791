"""
Global test configuration and fixtures for diff parsing tests.

Provides sample diffs and a parser instance shared across test modules.
"""

import pytest

from git_diff_parser.services.diff_parsing.unified_diff_parser import UnifiedDiffParser


@pytest.fixture
def diff_parser() -> UnifiedDiffParser:
    """Create UnifiedDiffParser instance for testing."""
    return UnifiedDiffParser()


@pytest.fixture
def two_file_diff() -> str:
    """Two files: the first with two addition-only hunks, the second with one mixed hunk."""
    return """diff --git a/src/main/java/com/example/shop/rest/model/GoodsReceiptDto.java b/src/main/java/com/example/shop/rest/model/GoodsReceiptDto.java
index 50e23fd0..2b304ea7 100644
--- a/src/main/java/com/example/shop/rest/model/GoodsReceiptDto.java
+++ b/src/main/java/com/example/shop/rest/model/GoodsReceiptDto.java
@@ -10,6 +10,7 @@ import lombok.Data;
 @Data
 @Builder
 public class GoodsReceiptDto {
+  private Long goodsReceiptId;
   private String internalOrderNumber;
   private String orderNumber;
   private String deliveryNoteNumber;
@@ -26,6 +27,7 @@ public class GoodsReceiptDto {
    */
   public static GoodsReceiptDto toDto(GoodsReceipt goodsReceipt) {
     return GoodsReceiptDto.builder()
+        .goodsReceiptId(goodsReceipt.getId())
         .internalOrderNumber(goodsReceipt.getInternalOrderNumber())
         .orderNumber(goodsReceipt.getOrderNumber())
         .deliveryNoteNumber(goodsReceipt.getDeliveryNoteNumber())
diff --git a/src/main/java/com/example/shop/persistence/GoodsReceiptPersistenceAdapter.java b/src/main/java/com/example/shop/persistence/GoodsReceiptPersistenceAdapter.java
index 13ef59a7..d0c03386 100644
--- a/src/main/java/com/example/shop/persistence/GoodsReceiptPersistenceAdapter.java
+++ b/src/main/java/com/example/shop/persistence/GoodsReceiptPersistenceAdapter.java
@@ -45,10 +45,8 @@ public class GoodsReceiptPersistenceAdapter implements GoodsReceiptPersistencePort
   }

   @Override
-  public Mono<GoodsReceipt> getByOrderNumber(String orderNumber) {
-    return goodsReceiptRepository
-        .findByOrderNumber(orderNumber)
-        .map(GoodsReceiptEntity::mapToDomain);
+  public Mono<GoodsReceipt> getByGoodsReceiptId(Long goodsReceiptId) {
+    return goodsReceiptRepository.findById(goodsReceiptId).map(GoodsReceiptEntity::mapToDomain);
   }"""


@pytest.fixture
def new_file_diff() -> str:
    """A newly created file, whose old side is /dev/null."""
    return """diff --git a/docs/CHANGELOG.md b/docs/CHANGELOG.md
new file mode 100644
index 0000000..3b18e51
--- /dev/null
+++ b/docs/CHANGELOG.md
@@ -0,0 +1,3 @@
+# Changelog
+
+- Initial release
"""


@pytest.fixture
def deleted_file_diff() -> str:
    """A removed file, whose new side is /dev/null."""
    return """diff --git a/scripts/legacy.sh b/scripts/legacy.sh
deleted file mode 100755
index 8c1f2a4..0000000
--- a/scripts/legacy.sh
+++ /dev/null
@@ -1,3 +0,0 @@
-#!/bin/sh
-echo "legacy"
-exit 0
"""
